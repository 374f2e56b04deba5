"""
Question service orchestrator.

Coordinates the two mutations a user can make to a generated question:
pinning and annotating.

Dependencies: interview_prep.boundary.db.CRUD, interview_prep.core.exceptions
System role: Question use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from interview_prep.application.services.serializers import parse_uuid, question_to_dict
from interview_prep.boundary.db.CRUD.question_crud import question_crud
from interview_prep.boundary.db.models.question_model import QuestionModel
from interview_prep.core.exceptions import QuestionNotFoundError

logger = logging.getLogger(__name__)


class QuestionService:
    """Question service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize question service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def toggle_pin(self, question_id: UUID | str) -> dict:
        """
        Flip the pinned flag of a question.

        Args:
            question_id: Question UUID (string form accepted)

        Returns:
            dict: Updated question

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        question = await self._get_or_raise(question_id)
        question.is_pinned = not question.is_pinned
        await self._save(question)

        logger.info(
            "Question pin toggled",
            extra={"question_id": str(question.id), "is_pinned": question.is_pinned},
        )
        return question_to_dict(question)

    async def update_note(self, question_id: UUID | str, note: str | None) -> dict:
        """
        Replace the note of a question; a missing note clears it.

        Args:
            question_id: Question UUID (string form accepted)
            note: New note text, None for empty

        Returns:
            dict: Updated question

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        question = await self._get_or_raise(question_id)
        question.note = note or ""
        await self._save(question)

        logger.info(
            "Question note updated",
            extra={"question_id": str(question.id), "note_length": len(question.note)},
        )
        return question_to_dict(question)

    async def _get_or_raise(self, question_id: UUID | str) -> QuestionModel:
        parsed_id = parse_uuid(question_id)
        question = await question_crud.get_by_id(self.db, parsed_id) if parsed_id else None
        if not question:
            raise QuestionNotFoundError(str(question_id))
        return question

    async def _save(self, question: QuestionModel) -> None:
        question_pk = question.id
        try:
            await self.db.flush()
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update question",
                extra={"error": str(e), "question_id": str(question_pk)},
            )
            raise
        await self.db.refresh(question)
