"""ORM models."""

from interview_prep.boundary.db.models.question_model import QuestionModel
from interview_prep.boundary.db.models.session_model import SessionModel

__all__ = ["QuestionModel", "SessionModel"]
