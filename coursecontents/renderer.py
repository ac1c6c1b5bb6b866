"""Render the ordered section list of the course contents block."""

from __future__ import annotations

import html
import logging
from typing import List, Optional

from .autotitle import extract_title
from .config import GlobalSettings
from .course_format import CourseFormat
from .formatting import format_string, format_text, rewrite_pluginfile_urls
from .models import BlockInstanceConfig, Course, RenderContext, RenderedEntry, Section, SectionList
from .strings import get_string
from .toggles import ResolvedToggles, SectionFlags, resolve_toggles, section_flags
from .tracing import log_event, trace

LIST_OPEN = '<ul class="section-list list-group">'
LIST_CLOSE = "</ul>"
COURSE_ICON = '<i class="icon fa fa-graduation-cap fa-fw" aria-hidden="true"></i>'

_ITEM_CLASS = "section-item list-group-item"
_BADGE_CLASS = "badge badge-secondary"


class SectionListRenderer:
    """Turn a course's sections into the block's list entries."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def render(
        self,
        course_format: CourseFormat,
        settings: GlobalSettings,
        instance: BlockInstanceConfig | None,
        context: RenderContext,
    ) -> SectionList:
        course = course_format.get_course()

        if not course_format.uses_sections():
            log_event(
                self._logger,
                logging.DEBUG,
                "renderer.no_sections_format",
                course=course.id,
                format=course.format,
            )
            if context.debug:
                return SectionList(markup=html.escape(get_string("notusingsections", context.language)))
            return SectionList()

        sections = course_format.get_sections()
        if not sections:
            return SectionList(markup=self._wrap([]))

        toggles = resolve_toggles(settings, instance)
        entries: List[RenderedEntry] = []

        with trace("renderer.render", logger=self._logger, course=course.id) as span:
            for section in sections:
                index = section.index
                if course.num_sections is not None and index > course.num_sections:
                    # Legacy formats keep orphaned sections past the declared count.
                    log_event(
                        self._logger,
                        logging.DEBUG,
                        "renderer.legacy_limit",
                        course=course.id,
                        section=index,
                        num_sections=course.num_sections,
                    )
                    break
                if not section.visible_to_user:
                    log_event(
                        self._logger,
                        logging.DEBUG,
                        "renderer.section.skipped",
                        course=course.id,
                        section=index,
                    )
                    continue

                flags = section_flags(index, toggles)
                if flags.course_link_before:
                    entries.append(
                        self._course_entry(course_format, settings, instance, context)
                    )
                if flags.hide:
                    continue

                title = self._section_title(course_format, section, toggles, context)
                entries.append(
                    self._section_entry(course_format, section, flags, title, context)
                )
            span.note(entries=len(entries))

        return SectionList(entries=tuple(entries), markup=self._wrap(entries))

    # ------------------------------------------------------------------
    # Titles
    # ------------------------------------------------------------------
    def _section_title(
        self,
        course_format: CourseFormat,
        section: Section,
        toggles: ResolvedToggles,
        context: RenderContext,
    ) -> str:
        title = ""
        if section.name:
            title = format_string(section.name)
        elif toggles.autotitle:
            title = format_string(self._summary_title(course_format.get_course(), section, context))

        if not title:
            title = format_string(course_format.get_section_name(section))
        return title

    def _summary_title(self, course: Course, section: Section, context: RenderContext) -> str:
        summary = rewrite_pluginfile_urls(
            section.summary,
            context.wwwroot,
            course.effective_context_id,
            "course",
            "section",
            section.id,
        )
        summary = format_text(summary, section.summary_format, para=False)
        return extract_title(f"<nolink>{summary}</nolink>")

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------
    def _course_entry(
        self,
        course_format: CourseFormat,
        settings: GlobalSettings,
        instance: BlockInstanceConfig | None,
        context: RenderContext,
    ) -> RenderedEntry:
        course = course_format.get_course()
        selected = context.selected_section is None
        item_class = _ITEM_CLASS + (" selected active" if selected else "")

        if instance is not None and instance.display_course_link_text:
            anchor_text = instance.display_course_link_text
        elif settings.display_course_link_text:
            anchor_text = settings.display_course_link_text
        else:
            anchor_text = course.shortname
        anchor_text = format_string(anchor_text)

        url = course_format.get_course_url()
        if selected:
            label = anchor_text
        else:
            label = f'<a href="{html.escape(url)}">{anchor_text}</a>'

        markup = (
            f'<li class="{item_class}">'
            f'<span class="section-number">{COURSE_ICON}</span> {label}'
            "</li>"
        )
        return RenderedEntry(
            kind="course",
            index=0,
            title=anchor_text,
            markup=markup,
            url=url,
            linked=not selected,
            selected=selected,
        )

    def _section_entry(
        self,
        course_format: CourseFormat,
        section: Section,
        flags: SectionFlags,
        title: str,
        context: RenderContext,
    ) -> RenderedEntry:
        index = section.index
        item_class = _ITEM_CLASS
        badge_class = _BADGE_CLASS

        selected = context.selected_section is not None and index == context.selected_section
        if selected:
            item_class += " selected active"
            badge_class += " badge-light"

        current = course_format.is_section_current(section)
        if current:
            item_class += " current active"
            badge_class += " badge-light"

        if flags.enumerate:
            label = (
                f'<span class="section-number {badge_class}">{flags.number}</span> '
                f'<span class="section-title">{title}</span>'
            )
        else:
            label = f'<span class="section-title not-enumerated">{title}</span>'

        url = course_format.get_view_url(section)
        dimmed = not section.visible
        if selected:
            body = label
        else:
            class_attr = ' class="dimmed"' if dimmed else ""
            body = f'<a href="{html.escape(url)}"{class_attr}>{label}</a>'

        return RenderedEntry(
            kind="section",
            index=index,
            title=title,
            markup=f'<li class="{item_class}">{body}</li>',
            number=flags.number if flags.enumerate else None,
            url=url,
            linked=not selected,
            selected=selected,
            current=current,
            dimmed=dimmed,
            enumerated=flags.enumerate,
        )

    @staticmethod
    def _wrap(entries: List[RenderedEntry]) -> str:
        lines = [LIST_OPEN]
        lines.extend(f"  {entry.markup}" for entry in entries)
        lines.append(LIST_CLOSE)
        return "\n".join(lines)


def render_section_list(
    course_format: CourseFormat,
    settings: GlobalSettings,
    instance: BlockInstanceConfig | None = None,
    context: RenderContext | None = None,
) -> SectionList:
    """Render the section list with a throwaway :class:`SectionListRenderer`."""

    return SectionListRenderer().render(course_format, settings, instance, context or RenderContext())


__all__ = ["COURSE_ICON", "LIST_CLOSE", "LIST_OPEN", "SectionListRenderer", "render_section_list"]
