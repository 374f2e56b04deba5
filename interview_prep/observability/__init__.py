"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from interview_prep.observability.logger import configure_logging

__all__ = ["configure_logging"]
