"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from interview_prep.boundary.db.CRUD import session_crud, question_crud

    session = await session_crud.get_with_questions(db, session_id)
"""

from interview_prep.boundary.db.CRUD.base_crud import BaseCRUD
from interview_prep.boundary.db.CRUD.question_crud import QuestionCRUD, question_crud
from interview_prep.boundary.db.CRUD.session_crud import SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "QuestionCRUD",
    "question_crud",
    "SessionCRUD",
    "session_crud",
]
