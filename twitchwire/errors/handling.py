from __future__ import annotations

import logging

from ..logging_config import log_structured_error
from .internal import (
    InternalError,
    LineTooLong,
    MessageError,
    TagParseError,
    TokenizeError,
)


def classify_error(error: Exception) -> str:
    """Return the aggregation category for ``error``."""
    if isinstance(error, TokenizeError):
        return "tokenize"
    if isinstance(error, MessageError):
        return "message"
    if isinstance(error, TagParseError):
        return "tag"
    if isinstance(error, LineTooLong):
        return "line_length"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(
    message: str,
    error: Exception,
    context: dict | None = None,
    level: int = logging.WARNING,
) -> None:
    """Logs an error message with the associated exception details.

    The error's own structured ``data`` is merged under the caller's context
    so the aggregated record carries both.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
        level: Logging level forwarded to the structured logger.
    """
    merged: dict = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
        level=level,
    )
