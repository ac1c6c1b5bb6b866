"""Tests for :mod:`coursecontents.toggles`."""

from __future__ import annotations

import pytest

from coursecontents.config import GlobalSettings
from coursecontents.errors import InvalidToggleSetting
from coursecontents.models import BlockInstanceConfig
from coursecontents.toggles import ResolvedToggles, ToggleSetting, resolve, resolve_toggles, section_flags


@pytest.mark.parametrize("instance", [None, True, False])
def test_forced_settings_ignore_instance(instance: bool | None) -> None:
    """Given a forced site-wide state When resolving Then the instance value is ignored."""

    assert resolve(ToggleSetting.FORCED_OFF, instance) is False
    assert resolve(ToggleSetting.FORCED_ON, instance) is True


def test_optional_settings_use_default_without_instance() -> None:
    """Given an optional state and no instance value When resolving Then the site default applies."""

    assert resolve(ToggleSetting.OPTIONAL_ON, None) is True
    assert resolve(ToggleSetting.OPTIONAL_OFF, None) is False


@pytest.mark.parametrize("setting", [ToggleSetting.OPTIONAL_ON, ToggleSetting.OPTIONAL_OFF])
@pytest.mark.parametrize("instance", [True, False])
def test_optional_settings_follow_instance(setting: ToggleSetting, instance: bool) -> None:
    """Given an optional state and an instance value When resolving Then the instance value wins."""

    assert resolve(setting, instance) is instance


def test_coerce_accepts_strings_and_booleans() -> None:
    """Given stored values When coercing Then known states and booleans are accepted."""

    assert ToggleSetting.coerce(" Forced_On ") is ToggleSetting.FORCED_ON
    assert ToggleSetting.coerce(True) is ToggleSetting.OPTIONAL_ON
    assert ToggleSetting.coerce(False) is ToggleSetting.OPTIONAL_OFF
    assert ToggleSetting.FORCED_OFF.forced
    assert not ToggleSetting.OPTIONAL_ON.forced


def test_coerce_rejects_unknown_state() -> None:
    """Given an unknown state When coercing Then InvalidToggleSetting is raised."""

    with pytest.raises(InvalidToggleSetting):
        ToggleSetting.coerce("sometimes")


def test_resolve_toggles_keeps_explicit_false() -> None:
    """Given optional_on defaults and an instance storing False When resolving Then False is kept."""

    settings = GlobalSettings(
        autotitle=ToggleSetting.OPTIONAL_ON,
        enumerate=ToggleSetting.OPTIONAL_ON,
        display_course_link=ToggleSetting.FORCED_ON,
        hide_section_0=ToggleSetting.OPTIONAL_ON,
        enumerate_section_0=ToggleSetting.OPTIONAL_OFF,
    )
    instance = BlockInstanceConfig(enumerate=False, display_course_link=False)

    toggles = resolve_toggles(settings, instance)

    assert toggles == ResolvedToggles(
        autotitle=True,
        display_course_link=True,
        hide_section_0=True,
        enumerate_section_0=False,
        enumerate=False,
    )


def test_resolve_toggles_without_instance_uses_defaults() -> None:
    """Given no instance configuration When resolving Then the shipped defaults apply."""

    toggles = resolve_toggles(GlobalSettings(), None)

    assert toggles.autotitle is True
    assert toggles.enumerate is True
    assert toggles.display_course_link is False
    assert toggles.hide_section_0 is False
    assert toggles.enumerate_section_0 is False


def test_section_flags_shift_numbers_when_section_zero_enumerated() -> None:
    """Given enumerate and enumerate_section_0 When deriving flags Then numbers start at one."""

    toggles = ResolvedToggles(enumerate=True, enumerate_section_0=True)

    numbers = [section_flags(index, toggles).number for index in range(3)]

    assert numbers == [1, 2, 3]
    assert section_flags(0, toggles).enumerate is True


def test_section_flags_skip_section_zero_number_by_default() -> None:
    """Given enumerate without enumerate_section_0 When deriving flags Then section 0 is not numbered."""

    toggles = ResolvedToggles(enumerate=True, enumerate_section_0=False)

    first = section_flags(0, toggles)
    second = section_flags(1, toggles)

    assert first.enumerate is False
    assert second.enumerate is True
    assert second.number == 1


def test_section_flags_no_shift_without_enumerate() -> None:
    """Given enumerate_section_0 alone When deriving flags Then nothing is numbered or shifted."""

    toggles = ResolvedToggles(enumerate=False, enumerate_section_0=True)

    flags = section_flags(2, toggles)

    assert flags.enumerate is False
    assert flags.number == 2


def test_section_flags_course_link_and_hide_only_for_section_zero() -> None:
    """Given course link and hide toggles When deriving flags Then only section 0 is affected."""

    toggles = ResolvedToggles(display_course_link=True, hide_section_0=True)

    assert section_flags(0, toggles).course_link_before is True
    assert section_flags(0, toggles).hide is True
    assert section_flags(1, toggles).course_link_before is False
    assert section_flags(1, toggles).hide is False
