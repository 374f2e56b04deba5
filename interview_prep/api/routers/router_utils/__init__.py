"""
Router utility functions.

Contains helpers extracted from router endpoints to keep them clean.
"""

from interview_prep.api.routers.router_utils.error_handling import (
    error_response,
    handle_api_errors,
)

__all__ = [
    "error_response",
    "handle_api_errors",
]
