"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, interview_prep.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from interview_prep.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
HEALTH_PREFIX = "/health"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and latency.

    Health probes log at DEBUG; 4xx responses at WARNING; 5xx at ERROR.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        path = request.url.path
        context = {"method": request.method, "path": path}

        try:
            response: Response = await call_next(request)
        except Exception as e:
            context["latency_ms"] = _elapsed_ms(started)
            context["error_type"] = type(e).__name__
            logger.exception(f"{request.method} {path} raised", extra=context)
            raise

        context["status_code"] = response.status_code
        context["latency_ms"] = _elapsed_ms(started)
        logger.log(
            _level_for(path, response.status_code),
            f"{request.method} {path} -> {response.status_code}",
            extra=context,
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _level_for(path: str, status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    if path.startswith(HEALTH_PREFIX):
        return logging.DEBUG
    return logging.INFO


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
