"""
Structured logging helpers for the index build.

Attach stage and source context to log records as ``extra`` fields so
build progress and failures can be filtered per stage.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from enum import Enum
from typing import Any

MAX_VALUE_CHARS = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_CHARS) -> str:
    """
    Render a context value for a log record.

    Enums are logged by value; long text is truncated.

    Args:
        value: Value to render
        max_length: Maximum characters kept

    Returns:
        str: Printable value
    """
    if isinstance(value, Enum):
        value = value.value
    text = "None" if value is None else str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_stage(
    logger: logging.Logger,
    stage: str,
    message: str,
    level: int = logging.INFO,
    **context,
) -> None:
    """
    Log progress of one build stage.

    Args:
        logger: Logger instance
        stage: Build stage (fetch, chunk, embed, publish)
        message: Log message
        level: Log level
        **context: Extra fields (source, chunks, ...)
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["stage"] = stage
    logger.log(level, message, extra=extra)


def log_failure(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log a failure with its stage and the type of the error that caused it.

    Args:
        logger: Logger instance
        message: Log message
        exc: Failure to log; ``stage`` and ``__cause__`` are read when present
        **context: Extra fields
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["stage"] = safe_log_value(getattr(exc, "stage", None))
    extra["error_type"] = type(exc).__name__
    if exc.__cause__ is not None:
        extra["cause_type"] = type(exc.__cause__).__name__
    logger.error(message, exc_info=exc, extra=extra)
