"""Logging setup for the scene engine.

Engine modules log through ``logging.getLogger(__name__)``; this module only
decides where records go and how they look. Authoring events are DEBUG,
duration resolution is INFO, and frame compilation reports timings on the
``storyframe.compile`` logger at DEBUG.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

COMPILE_LOGGER_NAME = "storyframe.compile"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

F = TypeVar("F", bound=Callable[..., Any])

# Attribute names every LogRecord carries; anything else came in via ``extra``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record.

    ``context`` holds the call site plus any ``extra`` fields, e.g. the scene
    name attached by :func:`get_logger`::

        {"level": "INFO", "message": "...", "timestamp": "...",
         "context": {"logger_name": "...", "module": "...", "function": "...",
                     "line": 42, "scene": "showcase"}}
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            context["error_type"] = exc_type.__name__ if exc_type else None
            context["error_message"] = str(exc_value) if exc_value else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """(Re)configure root logging.

    Args:
        level: Level name, case-insensitive.
        format_string: Plain-text format; ignored when ``structured``.
        filename: Log file; stdout when None.
        structured: Emit JSON lines via :class:`StructuredJSONFormatter`.

    Raises:
        ValueError: If ``level`` is not a logging level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    handler: logging.Handler = (
        logging.FileHandler(filename) if filename else logging.StreamHandler(sys.stdout)
    )
    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)


def get_compile_logger() -> logging.Logger:
    return logging.getLogger(COMPILE_LOGGER_NAME)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Logger for ``name``, wrapped in an adapter when context is given.

    Example:
        >>> log = get_logger(__name__, scene="showcase")
        >>> log.info("Resolved narration")  # context carries scene="showcase"
    """
    base = logging.getLogger(name)
    if context:
        return logging.LoggerAdapter(base, context)
    return base


def log_performance(func: F) -> F:
    """Log the wall time of each call on the compile logger at DEBUG."""

    @functools.wraps(func)
    def timed(*args: Any, **kwargs: Any) -> Any:
        started = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - started
        get_compile_logger().debug(f"{func.__qualname__!r} took {elapsed:.4f} seconds")
        return result

    return timed  # type: ignore[return-value]
