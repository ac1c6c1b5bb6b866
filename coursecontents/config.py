"""Site-wide settings of the course contents block."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from .toggles import TOGGLE_NAMES, ToggleSetting

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_SETTINGS_PATH = _PROJECT_ROOT / "configs" / "settings.json"
_ENV_PREFIX = "COURSECONTENTS_"


@dataclass(slots=True, frozen=True)
class GlobalSettings:
    """Administrator defaults shared by every block instance on the site."""

    autotitle: ToggleSetting = ToggleSetting.OPTIONAL_ON
    enumerate: ToggleSetting = ToggleSetting.OPTIONAL_ON
    display_course_link: ToggleSetting = ToggleSetting.OPTIONAL_OFF
    display_course_link_text: str = ""
    hide_section_0: ToggleSetting = ToggleSetting.OPTIONAL_OFF
    enumerate_section_0: ToggleSetting = ToggleSetting.OPTIONAL_OFF

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "GlobalSettings":
        """Build settings from a mapping, ignoring unknown keys."""

        known = {field.name for field in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if key in TOGGLE_NAMES:
                values[key] = ToggleSetting.coerce(value)
            else:
                values[key] = str(value)
        return cls(**values)

    @classmethod
    def load(cls, path: Path | None = None) -> "GlobalSettings":
        """Load settings from disk and environment overrides."""

        settings_path = path or _DEFAULT_SETTINGS_PATH
        data: Dict[str, Any] = {}

        if settings_path.exists():
            try:
                data = json.loads(settings_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning(
                    "Unable to decode block settings at %s: %s", settings_path, exc
                )
                data = {}
            if not isinstance(data, dict):
                _LOGGER.warning("Ignoring block settings at %s: expected a JSON object", settings_path)
                data = {}

        for field in fields(cls):
            env_value = os.environ.get(f"{_ENV_PREFIX}{field.name.upper()}")
            if env_value is not None:
                data[field.name] = env_value

        return cls.from_mapping(data)


def load_global_settings(path: Path | None = None) -> GlobalSettings:
    """Helper to load the site-wide block settings."""

    return GlobalSettings.load(path)


__all__ = ["GlobalSettings", "load_global_settings"]
