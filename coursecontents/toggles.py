"""Tri-state display toggles and their resolution policy.

Every display feature of the block is configured twice: once site-wide, where
the administrator picks one of four :class:`ToggleSetting` states, and once
per block instance, where the teacher may store a plain boolean. The site-wide
``forced_*`` states win unconditionally; the ``optional_*`` states only supply
the default used while the instance has not stored a value of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from .errors import InvalidToggleSetting

if TYPE_CHECKING:  # pragma: no cover
    from .config import GlobalSettings
    from .models import BlockInstanceConfig

TOGGLE_NAMES = (
    "autotitle",
    "display_course_link",
    "hide_section_0",
    "enumerate_section_0",
    "enumerate",
)


class ToggleSetting(str, Enum):
    """Site-wide state of a display toggle."""

    FORCED_OFF = "forced_off"
    FORCED_ON = "forced_on"
    OPTIONAL_OFF = "optional_off"
    OPTIONAL_ON = "optional_on"

    @property
    def forced(self) -> bool:
        return self in (ToggleSetting.FORCED_OFF, ToggleSetting.FORCED_ON)

    @classmethod
    def coerce(cls, value: Any) -> "ToggleSetting":
        """Return ``value`` as a :class:`ToggleSetting`.

        Booleans map onto the optional states so that a legacy on/off checkbox
        keeps working. Anything else must spell one of the four states.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.OPTIONAL_ON if value else cls.OPTIONAL_OFF
        text = str(value).strip().lower()
        try:
            return cls(text)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidToggleSetting(
                f"Unsupported toggle setting '{value}'. Expected one of: {allowed}."
            ) from None


def resolve(global_setting: ToggleSetting, instance_override: Optional[bool] = None) -> bool:
    """Return the effective value of one toggle."""

    global_setting = ToggleSetting.coerce(global_setting)
    if global_setting is ToggleSetting.FORCED_OFF:
        return False
    if global_setting is ToggleSetting.FORCED_ON:
        return True
    if instance_override is None:
        return global_setting is ToggleSetting.OPTIONAL_ON
    return bool(instance_override)


@dataclass(frozen=True, slots=True)
class ResolvedToggles:
    """Effective values of all toggles for one render."""

    autotitle: bool = False
    display_course_link: bool = False
    hide_section_0: bool = False
    enumerate_section_0: bool = False
    enumerate: bool = False


@dataclass(frozen=True, slots=True)
class SectionFlags:
    """Per-section outcome of the section 0 rules."""

    course_link_before: bool
    hide: bool
    enumerate: bool
    number: int


def resolve_toggles(
    settings: "GlobalSettings",
    instance: "BlockInstanceConfig | None" = None,
) -> ResolvedToggles:
    """Resolve every toggle from the site-wide settings and the instance overrides."""

    values = {
        name: resolve(
            getattr(settings, name),
            getattr(instance, name) if instance is not None else None,
        )
        for name in TOGGLE_NAMES
    }
    return ResolvedToggles(**values)


def section_flags(index: int, toggles: ResolvedToggles) -> SectionFlags:
    """Apply the section 0 special cases to the resolved toggles.

    Section 0 is only enumerated when ``enumerate_section_0`` is on. When it
    is, section 0 takes the first number and every later section moves up by
    one.
    """

    is_first = index == 0
    enumerate_section = toggles.enumerate
    if is_first and not toggles.enumerate_section_0:
        enumerate_section = False

    number = index
    if enumerate_section and toggles.enumerate_section_0:
        number += 1

    return SectionFlags(
        course_link_before=is_first and toggles.display_course_link,
        hide=is_first and toggles.hide_section_0,
        enumerate=enumerate_section,
        number=number,
    )


__all__ = [
    "ResolvedToggles",
    "SectionFlags",
    "TOGGLE_NAMES",
    "ToggleSetting",
    "resolve",
    "resolve_toggles",
    "section_flags",
]
