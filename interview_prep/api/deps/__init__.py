"""
Dependency injection for API endpoints.

Exports service factories and the bearer-token user dependency.
"""

from interview_prep.api.deps.auth import get_current_user_id
from interview_prep.api.deps.dependencies import (
    get_generation_gateway,
    get_question_service,
    get_service_cache,
    get_session_service,
    get_settings_dependency,
)

__all__ = [
    "get_current_user_id",
    "get_generation_gateway",
    "get_question_service",
    "get_service_cache",
    "get_session_service",
    "get_settings_dependency",
]
