"""
Question ORM model.

One generated interview question/answer pair with the user's note and
pin flag.

Dependencies: sqlalchemy, interview_prep.boundary.db.base
System role: Question persistence
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from interview_prep.boundary.db.base import Base, UUIDMixin, TimestampMixin


class QuestionModel(Base, UUIDMixin, TimestampMixin):
    """
    Question ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Owning session, set once on creation
        question: Question text
        answer: Answer text (may contain markdown code blocks)
        note: User note, empty string by default
        is_pinned: Whether the question is pinned to the top
        position: Insertion index within the session
    """

    __tablename__ = "questions"

    session_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("interview_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False, default="")
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    session = relationship("SessionModel", back_populates="questions")
