"""Service orchestrators."""

from .question_service import QuestionService
from .session_service import SessionService

__all__ = [
    "QuestionService",
    "SessionService",
]
