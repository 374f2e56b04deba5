"""
Structured logging helpers for request failures.

Keeps extra= payloads small and JSON-friendly: ids become strings, long
text is cut, collections are reduced to their size.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any
from uuid import UUID

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> Any:
    """
    Reduce a value to something safe to put in a log record.

    Args:
        value: Value to reduce
        max_length: Longest string kept verbatim

    Returns:
        Any: None, bool and numbers unchanged; everything else as a short string
    """
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (list, tuple, set, dict)):
        return f"{type(value).__name__}[{len(value)}]"

    text = str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an exception with traceback and reduced context values.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being handled
        **context: Request context such as endpoint name and path ids
    """
    extra = {key: safe_log_value(value) for key, value in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.exception(message, extra=extra)
