"""
Session CRUD operations.

Provides Create, Read, Delete operations for SessionModel with
session-specific query methods.

Dependencies: sqlalchemy, interview_prep.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from interview_prep.boundary.db.models.session_model import SessionModel
from interview_prep.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with owner-scoped queries and eager loading of
    related questions.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_with_questions(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> SessionModel | None:
        """
        Retrieve session with eagerly loaded questions (insertion order).

        Args:
            session: Async database session
            id: Session UUID

        Returns:
            SessionModel with questions loaded, None if not found
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.id == id)
            .options(selectinload(SessionModel.questions))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_owner_with_questions(
        self,
        session: AsyncSession,
        owner_id: str,
    ) -> Sequence[SessionModel]:
        """
        Retrieve all sessions of one owner, newest first, with questions loaded.

        Args:
            session: Async database session
            owner_id: ID of the owning user

        Returns:
            Sequence of SessionModels ordered by created_at descending
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.owner_id == owner_id)
            .options(selectinload(SessionModel.questions))
            .order_by(SessionModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


session_crud = SessionCRUD()
