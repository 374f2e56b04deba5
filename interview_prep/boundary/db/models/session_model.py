"""
Session ORM model.

Represents one interview-prep run: the role, experience and topics a user
asked questions for, plus the generated questions themselves.

Dependencies: sqlalchemy, interview_prep.boundary.db.base
System role: Session persistence
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from interview_prep.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model owning an ordered collection of questions.

    The questions collection is derived from QuestionModel.session_id, so the
    back-reference is the only source of truth for membership. Deleting a
    session cascades to its questions.

    Attributes:
        id: UUID primary key (auto-generated)
        owner_id: ID of the user who created the session (immutable)
        role: Target job role
        experience: Candidate experience in years, as entered
        topics_to_focus: Comma-separated focus topics
        description: Free-text description
        questions: QuestionModel rows in insertion order
        created_at: Session creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "interview_sessions"

    owner_id: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        index=True,
        doc="Creating user's ID",
    )
    role: Mapped[str] = mapped_column(Text, nullable=False)
    experience: Mapped[str] = mapped_column(Text, nullable=False)
    topics_to_focus: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    questions = relationship(
        "QuestionModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="QuestionModel.position",
    )
