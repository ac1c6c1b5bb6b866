"""Data models used by the course contents block."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUE_STRINGS = {"1", "true", "yes", "on", "y"}
_FALSE_STRINGS = {"", "0", "false", "no", "off", "n"}


class SummaryFormat(IntEnum):
    """Markup flavour of a stored rich-text field."""

    MOODLE = 0
    HTML = 1
    PLAIN = 2
    MARKDOWN = 4


class BlockInstanceConfig(BaseModel):
    """Settings stored for one placement of the block.

    Every toggle is ``None`` until the instance stores a value. An explicit
    ``False`` is a configured value and overrides an ``optional_on`` default.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    blocktitle: str | None = Field(default=None, description="Custom block heading")
    autotitle: bool | None = Field(
        default=None,
        description="Derive missing section titles from the section summary",
    )
    enumerate: bool | None = Field(default=None, description="Show section numbers")
    display_course_link: bool | None = Field(
        default=None,
        description="Add a link to the course page before section 0",
    )
    display_course_link_text: str | None = Field(
        default=None,
        description="Label of the course link",
    )
    hide_section_0: bool | None = Field(default=None, description="Leave section 0 out")
    enumerate_section_0: bool | None = Field(
        default=None,
        description="Number section 0 and shift later numbers by one",
    )

    @field_validator(
        "autotitle",
        "enumerate",
        "display_course_link",
        "hide_section_0",
        "enumerate_section_0",
        mode="before",
    )
    @classmethod
    def _normalise_flag(cls, value: Any) -> bool | None:
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        text = str(value).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"Cannot interpret '{value}' as an on/off setting")

    @field_validator("blocktitle", "display_course_link_text", mode="before")
    @classmethod
    def _normalise_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value).strip()


class Serializable:
    """Mixin providing JSON serialisation helpers for dataclasses."""

    __slots__ = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the dataclass to a serialisable dictionary."""

        def _convert(value: Any) -> Any:
            if dataclasses.is_dataclass(value) and not isinstance(value, type):
                return {f.name: _convert(getattr(value, f.name)) for f in dataclasses.fields(value)}
            if isinstance(value, date):
                return value.isoformat()
            if isinstance(value, IntEnum):
                return int(value)
            if isinstance(value, (list, tuple)):
                return [_convert(item) for item in value]
            if isinstance(value, dict):
                return {key: _convert(val) for key, val in value.items()}
            return value

        return _convert(self)

    def to_json(self, path: Path) -> None:
        """Write the dataclass as JSON to the provided ``path``."""

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


@dataclass(frozen=True, slots=True)
class Section(Serializable):
    index: int
    id: int = 0
    name: Optional[str] = None
    summary: str = ""
    summary_format: SummaryFormat = SummaryFormat.HTML
    visible: bool = True
    visible_to_user: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Section":
        index = int(data["index"])
        if index < 0:
            raise ValueError(f"Section index must not be negative, got {index}")
        return cls(
            index=index,
            id=int(data.get("id", index)),
            name=data.get("name"),
            summary=data.get("summary") or "",
            summary_format=SummaryFormat(int(data.get("summary_format", SummaryFormat.HTML))),
            visible=bool(data.get("visible", True)),
            visible_to_user=bool(data.get("visible_to_user", True)),
        )


@dataclass(frozen=True, slots=True)
class Course(Serializable):
    id: int
    shortname: str
    fullname: str = ""
    format: str = "topics"
    sections: Tuple[Section, ...] = ()
    num_sections: Optional[int] = None
    marker: int = 0
    start_date: Optional[date] = None
    context_id: Optional[int] = None

    @property
    def effective_context_id(self) -> int:
        return self.context_id if self.context_id is not None else self.id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Course":
        sections = tuple(
            sorted(
                (Section.from_dict(item) for item in data.get("sections", [])),
                key=lambda section: section.index,
            )
        )
        start_date = data.get("start_date")
        num_sections = data.get("num_sections")
        context_id = data.get("context_id")
        return cls(
            id=int(data["id"]),
            shortname=str(data.get("shortname", "")),
            fullname=str(data.get("fullname", "")),
            format=str(data.get("format", "topics")),
            sections=sections,
            num_sections=int(num_sections) if num_sections is not None else None,
            marker=int(data.get("marker", 0)),
            start_date=date.fromisoformat(start_date) if start_date else None,
            context_id=int(context_id) if context_id is not None else None,
        )


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Request-scoped inputs of a render."""

    selected_section: Optional[int] = None
    wwwroot: str = "http://localhost"
    debug: bool = False
    language: str = "en"


@dataclass(frozen=True, slots=True)
class RenderedEntry(Serializable):
    kind: str
    index: int
    title: str
    markup: str
    number: Optional[int] = None
    url: Optional[str] = None
    linked: bool = False
    selected: bool = False
    current: bool = False
    dimmed: bool = False
    enumerated: bool = False


@dataclass(frozen=True, slots=True)
class SectionList(Serializable):
    entries: Tuple[RenderedEntry, ...] = ()
    markup: str = ""


@dataclass(slots=True)
class BlockContent(Serializable):
    text: str = ""
    footer: str = ""
    title: str = ""
    entries: Tuple[RenderedEntry, ...] = field(default_factory=tuple)


__all__ = [
    "BlockContent",
    "BlockInstanceConfig",
    "Course",
    "RenderContext",
    "RenderedEntry",
    "Section",
    "SectionList",
    "Serializable",
    "SummaryFormat",
]
