"""Command line entrypoint for rendering the course contents block."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from coursecontents.blocks import CourseContentsBlock
from coursecontents.config import load_global_settings
from coursecontents.course_format import get_course_format
from coursecontents.errors import CourseContentsError
from coursecontents.logging_config import configure_logging, parse_log_level
from coursecontents.storage import load_course, load_instance_config


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the course contents block for a course snapshot")
    parser.add_argument("course", type=Path, help="Path to the course snapshot (JSON).")
    parser.add_argument(
        "--instance-config",
        type=Path,
        help="Path to the block instance settings (JSON). Omit for an unconfigured block.",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        help="Path to the site-wide settings (default: configs/settings.json).",
    )
    parser.add_argument("--section", type=int, help="Index of the section selected in the request.")
    parser.add_argument(
        "--wwwroot",
        default=os.environ.get("COURSECONTENTS_WWWROOT", "http://localhost"),
        help="Site root used to build course and section URLs.",
    )
    parser.add_argument("--lang", default="en", help="Language of generated strings (default: en)")
    parser.add_argument("--debug", action="store_true", help="Show diagnostic placeholders.")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(parse_log_level(args.log_level, logging.WARNING))

    try:
        course = load_course(args.course)
        block = CourseContentsBlock(
            get_course_format(course, wwwroot=args.wwwroot, language=args.lang),
            settings=load_global_settings(args.settings),
            config=load_instance_config(args.instance_config),
            language=args.lang,
        )
    except (CourseContentsError, ValueError) as exc:
        logging.getLogger("contents").error("%s", exc)
        return 1

    content = block.get_content(args.section, debug=args.debug)
    sys.stdout.write(f"{content.title}\n{content.text}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
