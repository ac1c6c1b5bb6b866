"""The course contents block."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..config import GlobalSettings
from ..course_format import CourseFormat
from ..models import BlockContent, BlockInstanceConfig, RenderContext
from ..renderer import SectionListRenderer
from ..strings import get_string
from ..tracing import log_event
from .common import Block


class CourseContentsBlock(Block):
    """List the sections of the course the block is placed in.

    ``course_format`` is ``None`` while the block is not placed on a course
    page; such a block renders empty content. ``config`` holds the instance
    settings and is ``None`` until the instance has been configured.
    """

    def __init__(
        self,
        course_format: Optional[CourseFormat] = None,
        *,
        settings: Optional[GlobalSettings] = None,
        config: Optional[BlockInstanceConfig] = None,
        renderer: Optional[SectionListRenderer] = None,
        language: str = "en",
    ) -> None:
        super().__init__(name="block_course_contents")
        self.course_format = course_format
        self.settings = settings or GlobalSettings()
        self.config = config
        self.language = language
        self._renderer = renderer or SectionListRenderer()
        self.title = get_string("pluginname", language)
        self.specialization()

    def specialization(self) -> None:
        if self.config is not None and self.config.blocktitle:
            self.title = self.config.blocktitle
        else:
            self.title = get_string("config_blocktitle_default", self.language)

    def applicable_formats(self) -> Dict[str, bool]:
        return {"site-index": True, "course-view-*": True}

    def has_config(self) -> bool:
        return True

    def get_content(
        self,
        selected_section: Optional[int] = None,
        *,
        debug: bool = False,
    ) -> BlockContent:
        if self.content is not None:
            return self.content

        self.content = BlockContent(title=self.title)
        if self.course_format is None:
            return self.content

        context = RenderContext(
            selected_section=selected_section,
            wwwroot=self.course_format.wwwroot,
            debug=debug,
            language=self.language,
        )
        section_list = self._renderer.render(self.course_format, self.settings, self.config, context)
        self.content.text = section_list.markup
        self.content.entries = section_list.entries

        log_event(
            self.logger,
            logging.INFO,
            "block.render",
            course=self.course_format.get_course().id,
            selected=selected_section,
            entries=len(section_list.entries),
        )
        return self.content


__all__ = ["CourseContentsBlock"]
