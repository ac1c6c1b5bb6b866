"""Course contents block: a navigable list of a course's sections."""

from .blocks import CourseContentsBlock
from .config import GlobalSettings, load_global_settings
from .course_format import get_course_format
from .models import BlockInstanceConfig, Course, RenderContext, Section
from .renderer import SectionListRenderer, render_section_list
from .toggles import ToggleSetting, resolve

__all__ = [
    "BlockInstanceConfig",
    "Course",
    "CourseContentsBlock",
    "GlobalSettings",
    "RenderContext",
    "Section",
    "SectionListRenderer",
    "ToggleSetting",
    "get_course_format",
    "load_global_settings",
    "render_section_list",
    "resolve",
]
