"""Exceptions raised by the course contents block."""


class CourseContentsError(Exception):
    """Base class for every error raised by this package."""


class InvalidToggleSetting(CourseContentsError, ValueError):
    """Raised when a stored site-wide toggle is not one of the four known states."""


class CourseNotFound(CourseContentsError, LookupError):
    """Raised when no course snapshot exists for the requested identifier."""


__all__ = ["CourseContentsError", "CourseNotFound", "InvalidToggleSetting"]
