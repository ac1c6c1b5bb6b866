"""FastAPI preview service rendering the course contents block inside a course page."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from coursecontents.blocks import CourseContentsBlock
from coursecontents.config import load_global_settings
from coursecontents.course_format import get_course_format
from coursecontents.errors import CourseNotFound
from coursecontents.storage import CourseRepository

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
DEFAULT_DATA_DIR = BASE_DIR.parent / "data"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

app = FastAPI(title="Course Contents Preview")


def _build_block(course_id: int, request: Request) -> CourseContentsBlock:
    repository = CourseRepository(Path(os.environ.get("COURSECONTENTS_DATA_DIR", DEFAULT_DATA_DIR)))
    settings_path = os.environ.get("COURSECONTENTS_SETTINGS_PATH")
    wwwroot = os.environ.get("COURSECONTENTS_WWWROOT") or str(request.base_url).rstrip("/")

    try:
        course = repository.get_course(course_id)
    except CourseNotFound as exc:
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found") from exc

    return CourseContentsBlock(
        get_course_format(course, wwwroot=wwwroot),
        settings=load_global_settings(Path(settings_path) if settings_path else None),
        config=repository.get_instance_config(course_id),
    )


@app.get("/course/{course_id}", response_class=HTMLResponse)
def view_course(
    request: Request,
    course_id: int,
    section: Optional[int] = Query(default=None, ge=0),
    debug: bool = Query(default=False),
) -> HTMLResponse:
    """Render a minimal course page with the block in its side column."""

    block = _build_block(course_id, request)
    content = block.get_content(section, debug=debug)
    course = block.course_format.get_course() if block.course_format else None

    return templates.TemplateResponse(
        request,
        "course.html",
        {
            "course": course,
            "block": content,
            "selected": section,
        },
    )


@app.get("/course/{course_id}/block")
def get_block(
    request: Request,
    course_id: int,
    section: Optional[int] = Query(default=None, ge=0),
    debug: bool = Query(default=False),
) -> Dict[str, Any]:
    """Return the rendered block as JSON."""

    content = _build_block(course_id, request).get_content(section, debug=debug)
    return content.to_dict()
