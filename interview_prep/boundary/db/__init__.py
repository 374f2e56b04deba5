"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - SessionModel, QuestionModel: Core domain entities
  - session_crud, question_crud: CRUD operation singletons

Dependencies: sqlalchemy, interview_prep.configs
System role: Database adapter providing persistent storage for sessions
and their questions.
"""

from interview_prep.boundary.db.base import Base, TimestampMixin, UUIDMixin
from interview_prep.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from interview_prep.boundary.db.models.session_model import SessionModel
from interview_prep.boundary.db.models.question_model import QuestionModel
from interview_prep.boundary.db.CRUD import (
    BaseCRUD,
    QuestionCRUD,
    SessionCRUD,
    question_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "SessionModel",
    "QuestionModel",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "QuestionCRUD",
    # CRUD singletons
    "session_crud",
    "question_crud",
]
