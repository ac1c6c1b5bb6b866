"""Course formats: how a course organises, names and links its sections."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Callable, Dict, Optional, Tuple, Type

from .models import Course, Section
from .strings import get_string

_LOGGER = logging.getLogger(__name__)


class CourseFormat(ABC):
    """Read-only view of a course as organised by its format."""

    name = "base"

    def __init__(
        self,
        course: Course,
        *,
        wwwroot: str = "http://localhost",
        language: str = "en",
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._course = course
        self._wwwroot = wwwroot.rstrip("/")
        self._language = language
        self._today = today or date.today

    @property
    def wwwroot(self) -> str:
        return self._wwwroot

    @property
    def language(self) -> str:
        return self._language

    def get_course(self) -> Course:
        return self._course

    @abstractmethod
    def uses_sections(self) -> bool:
        """Return whether the format splits the course into sections."""

    def get_sections(self) -> Tuple[Section, ...]:
        return tuple(sorted(self._course.sections, key=lambda section: section.index))

    def get_default_section_name(self, section: Section) -> str:
        if section.index == 0:
            return get_string("sectiongeneral", self._language)
        return get_string("sectionname", self._language, number=section.index)

    def get_section_name(self, section: Section) -> str:
        """Return the explicit section name or the format's generated one."""

        if section.name and section.name.strip():
            return section.name
        return self.get_default_section_name(section)

    def is_section_current(self, section: Section) -> bool:
        return False

    def get_course_url(self) -> str:
        return f"{self._wwwroot}/course/view.php?id={self._course.id}"

    def get_view_url(self, section: Section) -> str:
        return f"{self.get_course_url()}#section-{section.index}"


class TopicsFormat(CourseFormat):
    """Sections are topics; the teacher highlights one with the course marker."""

    name = "topics"

    def uses_sections(self) -> bool:
        return True

    def is_section_current(self, section: Section) -> bool:
        marker = self._course.marker
        return marker > 0 and section.index == marker


class WeeksFormat(CourseFormat):
    """Every section after section 0 covers one week from the course start."""

    name = "weeks"

    def uses_sections(self) -> bool:
        return True

    def get_section_dates(self, section: Section) -> Optional[Tuple[date, date]]:
        start = self._course.start_date
        if start is None or section.index == 0:
            return None
        week_start = start + timedelta(weeks=section.index - 1)
        return week_start, week_start + timedelta(days=6)

    def get_default_section_name(self, section: Section) -> str:
        dates = self.get_section_dates(section)
        if dates is None:
            return super().get_default_section_name(section)
        start, end = dates
        return get_string(
            "weekrange",
            self._language,
            start=f"{start.day} {start:%B}",
            end=f"{end.day} {end:%B}",
        )

    def is_section_current(self, section: Section) -> bool:
        dates = self.get_section_dates(section)
        if dates is None:
            return False
        start, end = dates
        return start <= self._today() <= end


class SingleActivityFormat(CourseFormat):
    """The whole course is one activity; there are no sections to list."""

    name = "singleactivity"

    def uses_sections(self) -> bool:
        return False


_FORMATS: Dict[str, Type[CourseFormat]] = {
    TopicsFormat.name: TopicsFormat,
    WeeksFormat.name: WeeksFormat,
    SingleActivityFormat.name: SingleActivityFormat,
}


def get_course_format(
    course: Course,
    *,
    wwwroot: str = "http://localhost",
    language: str = "en",
) -> CourseFormat:
    """Return the format object registered for ``course.format``."""

    format_cls = _FORMATS.get(course.format.strip().lower())
    if format_cls is None:
        _LOGGER.warning(
            "Unknown course format '%s' for course %s, using topics", course.format, course.id
        )
        format_cls = TopicsFormat
    return format_cls(course, wwwroot=wwwroot, language=language)


__all__ = [
    "CourseFormat",
    "SingleActivityFormat",
    "TopicsFormat",
    "WeeksFormat",
    "get_course_format",
]
