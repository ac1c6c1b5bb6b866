"""Shared pytest fixtures for the course contents test-suite."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest
from bs4 import BeautifulSoup

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from coursecontents.config import GlobalSettings
from coursecontents.course_format import TopicsFormat
from coursecontents.models import Course, RenderContext, Section, SummaryFormat
from coursecontents.toggles import ToggleSetting

WWWROOT = "https://lms.example.edu"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the root directory containing reusable fixture files."""

    return Path(__file__).parent / "fixtures"


@pytest.fixture
def json_fixture(fixtures_dir: Path) -> Callable[[str], dict]:
    """Return a callable that loads JSON fixture payloads by name."""

    def _load(name: str) -> dict:
        path = fixtures_dir / "json" / name
        return json.loads(path.read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def make_sections() -> Callable[..., tuple[Section, ...]]:
    """Return a builder producing ``count`` visible sections named "Unit N"."""

    def _build(count: int, overrides: Optional[Dict[int, Dict[str, Any]]] = None) -> tuple[Section, ...]:
        sections = []
        for index in range(count):
            fields: Dict[str, Any] = {"index": index, "id": 500 + index, "name": f"Unit {index}"}
            fields.update((overrides or {}).get(index, {}))
            sections.append(Section(**fields))
        return tuple(sections)

    return _build


@pytest.fixture
def make_course(make_sections: Callable[..., tuple[Section, ...]]) -> Callable[..., Course]:
    """Return a builder for a topics course with ``count`` sections."""

    def _build(count: int = 4, *, sections: Optional[tuple[Section, ...]] = None, **fields: Any) -> Course:
        values: Dict[str, Any] = {
            "id": 42,
            "shortname": "HIST200",
            "fullname": "Modern History",
            "format": "topics",
            "sections": sections if sections is not None else make_sections(count),
        }
        values.update(fields)
        return Course(**values)

    return _build


@pytest.fixture
def topics_format(make_course: Callable[..., Course]) -> Callable[..., TopicsFormat]:
    """Return a builder wrapping a course from ``make_course`` in the topics format."""

    def _build(*args: Any, **kwargs: Any) -> TopicsFormat:
        return TopicsFormat(make_course(*args, **kwargs), wwwroot=WWWROOT)

    return _build


@pytest.fixture
def plain_settings() -> GlobalSettings:
    """Return settings with every toggle optional and off."""

    return GlobalSettings(
        autotitle=ToggleSetting.OPTIONAL_OFF,
        enumerate=ToggleSetting.OPTIONAL_OFF,
        display_course_link=ToggleSetting.OPTIONAL_OFF,
        hide_section_0=ToggleSetting.OPTIONAL_OFF,
        enumerate_section_0=ToggleSetting.OPTIONAL_OFF,
    )


@pytest.fixture
def context() -> RenderContext:
    """Return a render context without a selected section."""

    return RenderContext(wwwroot=WWWROOT)


@pytest.fixture
def parse_markup() -> Callable[[str], BeautifulSoup]:
    """Return a helper parsing rendered markup with BeautifulSoup."""

    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")

    return _parse


@pytest.fixture
def summary_section() -> Callable[..., Section]:
    """Return a builder for an unnamed section carrying only a summary."""

    def _build(index: int, summary: str, summary_format: SummaryFormat = SummaryFormat.HTML) -> Section:
        return Section(index=index, id=700 + index, name=None, summary=summary, summary_format=summary_format)

    return _build
