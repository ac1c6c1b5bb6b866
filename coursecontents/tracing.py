"""Structured logging helpers used while rendering blocks."""

from __future__ import annotations

import dataclasses
import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional

__all__ = ["TraceSpan", "trace", "log_event", "safe_json"]


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into a JSON-serialisable structure."""

    if isinstance(value, Enum):
        return value.value

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: safe_json(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }

    if isinstance(value, (list, tuple, set, frozenset)):
        return [safe_json(item) for item in value]

    if isinstance(value, dict):
        return {str(key): safe_json(val) for key, val in value.items()}

    if hasattr(value, "model_dump") and callable(getattr(value, "model_dump")):
        return safe_json(value.model_dump())

    return repr(value)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc_info: bool | BaseException | None = None,
    **fields: Any,
) -> None:
    """Emit a structured log line encoded as JSON."""

    if not logger.isEnabledFor(level):
        return

    payload: Dict[str, Any] = {"event": event}
    if fields:
        payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})

    message = json.dumps(payload, ensure_ascii=False, sort_keys=True)
    logger.log(level, message, exc_info=exc_info)


@dataclass
class TraceSpan:
    """Represents an active trace span."""

    name: str
    logger: logging.Logger
    fields: Dict[str, Any]
    start_time: float

    def note(self, **fields: Any) -> None:
        """Emit an in-span structured debug note."""

        base = {"trace": self.name}
        base.update(self.fields)
        base.update(fields)
        log_event(self.logger, logging.DEBUG, "trace.note", **base)

    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self.start_time) * 1000, 2)


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[TraceSpan]:
    """Log ``trace.start``/``trace.end`` around a block, or ``trace.error`` when it raises."""

    logger = logger or logging.getLogger("coursecontents.trace")
    span = TraceSpan(name=name, logger=logger, fields=dict(fields), start_time=time.perf_counter())
    base_fields = {"trace": name}
    base_fields.update(fields)
    log_event(logger, logging.DEBUG, "trace.start", **base_fields)
    try:
        yield span
    except Exception as exc:
        log_event(
            logger,
            logging.ERROR,
            "trace.error",
            exc_info=True,
            duration_ms=span.elapsed_ms(),
            error=repr(exc),
            **base_fields,
        )
        raise
    else:
        log_event(logger, logging.DEBUG, "trace.end", duration_ms=span.elapsed_ms(), **base_fields)
