"""
API error handling utilities.

Provides a decorator for consistent error handling across endpoints and
the JSON body every error response uses.

Dependencies: fastapi, interview_prep.core.exceptions
System role: Domain exception to HTTP response mapping
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi.responses import JSONResponse

from interview_prep.core.exceptions import InterviewPrepException, ServiceError
from interview_prep.models.common import ErrorResponse
from interview_prep.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(exc: InterviewPrepException) -> JSONResponse:
    """
    Build the JSON error response for a domain exception.

    Args:
        exc: Domain exception carrying status code and message

    Returns:
        JSONResponse: {success: false, message, error?}
    """
    body = ErrorResponse(message=exc.message, error=exc.error)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


def handle_api_errors(failure_message: str = "Server error") -> Callable[[F], F]:
    """
    Decorator factory mapping endpoint failures to JSON error responses.

    Domain exceptions keep their status and message. Anything else becomes
    a 500 carrying failure_message and the underlying error text.

    Args:
        failure_message: Message returned for unexpected exceptions
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except InterviewPrepException as e:
                log = logger.error if e.status_code >= 500 else logger.warning
                log(
                    e.message,
                    extra={
                        "endpoint": func.__name__,
                        "status_code": e.status_code,
                        "details": e.details,
                    },
                )
                return error_response(e)

            except Exception as e:
                log_exception_with_context(
                    logger,
                    f"Unexpected failure in {func.__name__}",
                    e,
                    endpoint=func.__name__,
                    **{k: v for k, v in kwargs.items() if k.endswith("_id")},
                )
                return error_response(ServiceError(failure_message, error=str(e)))

        return wrapper  # type: ignore

    return decorator
