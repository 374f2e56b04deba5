"""
Question CRUD operations.

Provides Create, Read, Delete operations for QuestionModel with
session-scoped bulk and ordering queries.

Dependencies: sqlalchemy, interview_prep.boundary.db.models
System role: Question persistence operations
"""

from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from interview_prep.boundary.db.models.question_model import QuestionModel
from interview_prep.boundary.db.CRUD.base_crud import BaseCRUD


class QuestionCRUD(BaseCRUD[QuestionModel]):
    """CRUD operations for QuestionModel."""

    def __init__(self) -> None:
        """Initialize QuestionCRUD with QuestionModel."""
        super().__init__(QuestionModel)

    async def create_many(
        self,
        session: AsyncSession,
        session_id: UUID,
        pairs: Iterable[dict],
        start_position: int = 0,
    ) -> list[QuestionModel]:
        """
        Insert question/answer pairs for one session in a single flush.

        Args:
            session: Async database session
            session_id: Owning session UUID
            pairs: Dicts with "question" and "answer" keys
            start_position: Position assigned to the first pair

        Returns:
            Created QuestionModels in input order
        """
        instances = [
            QuestionModel(
                session_id=session_id,
                question=pair.get("question") or "",
                answer=pair.get("answer") or "",
                position=start_position + offset,
            )
            for offset, pair in enumerate(pairs)
        ]
        if not instances:
            return []

        session.add_all(instances)
        await session.flush()
        for instance in instances:
            await session.refresh(instance)
        return instances

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: UUID,
        pinned_first: bool = False,
    ) -> Sequence[QuestionModel]:
        """
        Retrieve questions of one session.

        Args:
            session: Async database session
            session_id: Owning session UUID
            pinned_first: Order pinned questions first, then newest first;
                otherwise insertion order

        Returns:
            Sequence of QuestionModels
        """
        stmt = select(QuestionModel).where(QuestionModel.session_id == session_id)
        if pinned_first:
            stmt = stmt.order_by(
                QuestionModel.is_pinned.desc(),
                QuestionModel.created_at.desc(),
                QuestionModel.position.desc(),
            )
        else:
            stmt = stmt.order_by(QuestionModel.position)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def next_position(self, session: AsyncSession, session_id: UUID) -> int:
        """
        Position for the next question appended to a session.

        Args:
            session: Async database session
            session_id: Owning session UUID

        Returns:
            One past the highest existing position, 0 for an empty session
        """
        stmt = select(func.max(QuestionModel.position)).where(
            QuestionModel.session_id == session_id
        )
        result = await session.execute(stmt)
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def delete_by_session(self, session: AsyncSession, session_id: UUID) -> int:
        """
        Delete every question that references a session.

        Args:
            session: Async database session
            session_id: Owning session UUID

        Returns:
            Number of deleted rows
        """
        stmt = delete(QuestionModel).where(QuestionModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.rowcount


question_crud = QuestionCRUD()
