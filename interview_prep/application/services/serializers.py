"""
ORM to dict conversion shared by the services.

Services hand plain dicts to the API layer so routers never touch ORM
instances after the unit of work has ended.

Dependencies: interview_prep.boundary.db.models
System role: Service output shaping
"""

from typing import Iterable
from uuid import UUID

from interview_prep.boundary.db.models.question_model import QuestionModel
from interview_prep.boundary.db.models.session_model import SessionModel


def parse_uuid(value: UUID | str | None) -> UUID | None:
    """Parse an identifier, returning None for anything that is not a UUID."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


def question_to_dict(question: QuestionModel) -> dict:
    return {
        "id": question.id,
        "session_id": question.session_id,
        "question": question.question,
        "answer": question.answer,
        "note": question.note or "",
        "is_pinned": question.is_pinned,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def session_to_dict(
    session: SessionModel,
    questions: Iterable[QuestionModel],
) -> dict:
    """
    Convert a session and an explicitly ordered question list to a dict.

    Args:
        session: Session row
        questions: The session's questions in the order to expose them

    Returns:
        dict: Session fields with nested question dicts
    """
    return {
        "id": session.id,
        "owner_id": session.owner_id,
        "role": session.role,
        "experience": session.experience,
        "topics_to_focus": session.topics_to_focus,
        "description": session.description,
        "questions": [question_to_dict(q) for q in questions],
        "created_at": session.created_at,
        "updated_at": session.updated_at,
    }
