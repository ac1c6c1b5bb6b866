"""Block implementations.

Each block lives in its own module; the convenience exports below are the
public API used by the entrypoints and tests.
"""

from .common import Block
from .course_contents import CourseContentsBlock

__all__ = ["Block", "CourseContentsBlock"]
