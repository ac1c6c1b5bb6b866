"""Logging utilities for the course contents block."""

from __future__ import annotations

import logging
import sys
from typing import Optional


_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def configure_logging(level: int = logging.INFO, stream: Optional[logging.Handler] = None) -> None:
    """Configure the root logger used by the entrypoints.

    Parameters
    ----------
    level:
        The logging level to apply across the root logger.
    stream:
        Optional handler. When omitted a handler writing to ``sys.stderr``
        is used so that rendered markup on ``stdout`` stays clean.
    """

    root_logger = logging.getLogger()
    if stream is None:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
    else:
        handler = stream

    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # configure_logging may run more than once per process (CLI + tests).
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def parse_log_level(value: str | None, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


__all__ = ["configure_logging", "parse_log_level"]
