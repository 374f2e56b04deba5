"""
Session service orchestrator.

Coordinates session lifecycle operations: creation with the initial
question set, owner listing, sorted retrieval, cascading deletion and
appending more questions. Every multi-step write is one transaction.

Dependencies: interview_prep.boundary.db.CRUD, interview_prep.core.exceptions
System role: Session use case orchestration
"""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from interview_prep.application.services.serializers import (
    parse_uuid,
    question_to_dict,
    session_to_dict,
)
from interview_prep.boundary.db.CRUD.question_crud import question_crud
from interview_prep.boundary.db.CRUD.session_crud import session_crud
from interview_prep.core.exceptions import (
    SessionNotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_session(
        self,
        role: str | None,
        experience: str | None,
        topics_to_focus: str | None,
        description: str | None,
        questions: list[dict] | None,
        owner_id: str,
    ) -> dict:
        """
        Create a session together with its initial questions.

        The session row and all question rows are written in one transaction;
        a failure on any step rolls back the whole creation.

        Args:
            role: Target job role
            experience: Candidate experience in years
            topics_to_focus: Comma-separated focus topics
            description: Optional free-text description
            questions: Pre-generated pairs with "question" and "answer"
            owner_id: ID of the creating user

        Returns:
            dict: Created session with questions in insertion order

        Raises:
            ValidationError: If role, experience or topics are missing
        """
        for field, value in (
            ("role", role),
            ("experience", experience),
            ("topicsToFocus", topics_to_focus),
        ):
            if not value or not str(value).strip():
                raise ValidationError(field=field)

        try:
            session = await session_crud.create(
                self.db,
                owner_id=owner_id,
                role=role,
                experience=str(experience),
                topics_to_focus=topics_to_focus,
                description=description or "",
            )
            await question_crud.create_many(self.db, session.id, questions or [])
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create session",
                extra={"error": str(e), "owner_id": owner_id},
            )
            raise

        logger.info(
            "Session created",
            extra={
                "session_id": str(session.id),
                "owner_id": owner_id,
                "question_count": len(questions or []),
            },
        )
        created = await session_crud.get_with_questions(self.db, session.id)
        return session_to_dict(created, created.questions)

    async def list_sessions_for_owner(self, owner_id: str) -> list[dict]:
        """
        Get all sessions of one owner, newest first, with questions populated.

        Args:
            owner_id: ID of the owning user

        Returns:
            list[dict]: Session dicts with questions in insertion order
        """
        sessions = await session_crud.get_by_owner_with_questions(self.db, owner_id)
        return [session_to_dict(s, s.questions) for s in sessions]

    async def get_session(self, session_id: UUID | str) -> dict:
        """
        Get one session with questions pinned-first, then newest-first.

        Args:
            session_id: Session UUID (string form accepted)

        Returns:
            dict: Session data with sorted questions

        Raises:
            SessionNotFoundError: If the id is unknown or not a UUID
        """
        parsed_id = parse_uuid(session_id)
        session = await session_crud.get_by_id(self.db, parsed_id) if parsed_id else None
        if not session:
            raise SessionNotFoundError(str(session_id))

        questions = await question_crud.get_by_session(
            self.db, session.id, pinned_first=True
        )
        return session_to_dict(session, questions)

    async def delete_session(self, session_id: UUID | str, requester_id: str) -> None:
        """
        Delete a session and every question that references it.

        Args:
            session_id: Session UUID (string form accepted)
            requester_id: ID of the user asking for the deletion

        Raises:
            SessionNotFoundError: If the session does not exist
            UnauthorizedError: If the requester does not own the session
        """
        parsed_id = parse_uuid(session_id)
        session = await session_crud.get_by_id(self.db, parsed_id) if parsed_id else None
        if not session:
            raise SessionNotFoundError(str(session_id))

        if session.owner_id != requester_id:
            logger.warning(
                "Session deletion refused",
                extra={"session_id": str(session.id), "requester_id": requester_id},
            )
            raise UnauthorizedError("Not authorised to delete this session")

        session_pk = session.id
        try:
            removed = await question_crud.delete_by_session(self.db, session_pk)
            await session_crud.delete_by_id(self.db, session_pk)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete session",
                extra={"error": str(e), "session_id": str(session_pk)},
            )
            raise

        logger.info(
            "Session deleted",
            extra={"session_id": str(session_pk), "questions_removed": removed},
        )

    async def append_questions(
        self,
        session_id: UUID | str | None,
        questions: Any,
    ) -> list[dict]:
        """
        Add more questions to the end of an existing session.

        Args:
            session_id: Session UUID (string form accepted)
            questions: List of pairs with "question" and "answer"

        Returns:
            list[dict]: The created questions

        Raises:
            ValidationError: If session_id is missing or questions is not a list
            SessionNotFoundError: If the session does not exist
        """
        if not session_id or not isinstance(questions, list):
            raise ValidationError("Invalid input data")

        parsed_id = parse_uuid(session_id)
        session = await session_crud.get_by_id(self.db, parsed_id) if parsed_id else None
        if not session:
            raise SessionNotFoundError(str(session_id))

        session_pk = session.id
        try:
            start = await question_crud.next_position(self.db, session_pk)
            created = await question_crud.create_many(
                self.db, session_pk, questions, start_position=start
            )
            session.updated_at = datetime.now(timezone.utc)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to append questions",
                extra={"error": str(e), "session_id": str(session_pk)},
            )
            raise

        logger.info(
            "Questions appended",
            extra={"session_id": str(session_pk), "count": len(created)},
        )
        return [question_to_dict(q) for q in created]
