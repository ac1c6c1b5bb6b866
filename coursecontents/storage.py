"""Load course snapshots and block instance settings from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .errors import CourseNotFound
from .models import BlockInstanceConfig, Course
from .tracing import log_event

_LOGGER = logging.getLogger("coursecontents.storage")


def _read_json(path: Path) -> Any:
    log_event(_LOGGER, logging.DEBUG, "storage.read_json", path=str(path))
    return json.loads(path.read_text(encoding="utf-8"))


def load_course(path: Path) -> Course:
    """Build a :class:`Course` from the snapshot stored at ``path``."""

    if not path.exists():
        raise CourseNotFound(f"No course snapshot at {path}")
    course = Course.from_dict(_read_json(path))
    log_event(
        _LOGGER,
        logging.INFO,
        "storage.course_loaded",
        path=str(path),
        course=course.id,
        sections=len(course.sections),
    )
    return course


def load_instance_config(path: Optional[Path]) -> Optional[BlockInstanceConfig]:
    """Return the instance settings at ``path``, or ``None`` when not configured."""

    if path is None or not path.exists():
        return None
    config = BlockInstanceConfig.model_validate(_read_json(path))
    log_event(_LOGGER, logging.INFO, "storage.instance_config_loaded", path=str(path))
    return config


class CourseRepository:
    """Directory of ``{id}.json`` course snapshots with optional ``{id}.instance.json``."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = data_dir

    def course_path(self, course_id: int) -> Path:
        return self.data_dir / f"{course_id}.json"

    def instance_path(self, course_id: int) -> Path:
        return self.data_dir / f"{course_id}.instance.json"

    def get_course(self, course_id: int) -> Course:
        return load_course(self.course_path(course_id))

    def get_instance_config(self, course_id: int) -> Optional[BlockInstanceConfig]:
        return load_instance_config(self.instance_path(course_id))


__all__ = ["CourseRepository", "load_course", "load_instance_config"]
