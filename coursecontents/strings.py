"""User-facing strings of the block."""

from __future__ import annotations

from string import Template
from typing import Any, Dict

_STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "pluginname": "Course contents",
        "config_blocktitle_default": "Course contents",
        "notusingsections": "This course format does not use sections.",
        "sectiongeneral": "General",
        "sectionname": "Topic $number",
        "weekrange": "$start - $end",
        "courselink": "Course",
    },
    "de": {
        "pluginname": "Kursinhalt",
        "config_blocktitle_default": "Kursinhalt",
        "notusingsections": "Dieses Kursformat verwendet keine Abschnitte.",
        "sectiongeneral": "Allgemeines",
        "sectionname": "Thema $number",
        "weekrange": "$start - $end",
        "courselink": "Kurs",
    },
}

DEFAULT_LANGUAGE = "en"


def get_string(identifier: str, language: str = DEFAULT_LANGUAGE, **params: Any) -> str:
    """Return the localised string ``identifier`` with ``params`` substituted.

    Unknown languages fall back to English; unknown identifiers are returned
    wrapped in square brackets so that missing translations stay visible.
    """

    catalogue = _STRINGS.get(language, _STRINGS[DEFAULT_LANGUAGE])
    text = catalogue.get(identifier) or _STRINGS[DEFAULT_LANGUAGE].get(identifier)
    if text is None:
        return f"[[{identifier}]]"
    if params:
        text = Template(text).safe_substitute({key: str(value) for key, value in params.items()})
    return text


__all__ = ["DEFAULT_LANGUAGE", "get_string"]
