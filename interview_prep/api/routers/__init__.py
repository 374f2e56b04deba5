"""
API routers.

Exports all routers for registration in main app.
"""

from interview_prep.api.routers.ai import router as ai_router
from interview_prep.api.routers.health import router as health_router
from interview_prep.api.routers.questions import router as questions_router
from interview_prep.api.routers.sessions import router as sessions_router

__all__ = [
    "ai_router",
    "health_router",
    "questions_router",
    "sessions_router",
]
