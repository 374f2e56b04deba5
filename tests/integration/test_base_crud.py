"""
Test suite for BaseCRUD generic database operations.

Tests basic CRUD functionality: create, read by ID, delete.
Uses async fixtures with SQLAlchemy mocking to verify correct query behavior.

System role: Verification of generic database layer foundation
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from interview_prep.boundary.db.CRUD.base_crud import BaseCRUD
from interview_prep.boundary.db.models.question_model import QuestionModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(QuestionModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_id() -> uuid.UUID:
    """Provide sample UUID for testing."""
    return uuid.uuid4()


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    @pytest.mark.asyncio
    async def test_create_should_add_flush_and_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        """Test create adds instance and flushes/refreshes without committing."""
        # Act
        result = await base_crud.create(
            mock_session, session_id=sample_id, question="Q", answer="A"
        )

        # Assert
        assert isinstance(result, QuestionModel)
        assert result.question == "Q"
        mock_session.add.assert_called_once_with(result)
        mock_session.flush.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(result)
        mock_session.commit.assert_not_called()


class TestBaseCRUDGetById:
    """Test suite for BaseCRUD.get_by_id() method."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_when_missing(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        """Test get_by_id returns None for unknown id."""
        # Arrange
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await base_crud.get_by_id(mock_session, sample_id)

        # Assert
        assert result is None


class TestBaseCRUDDelete:
    """Test suite for BaseCRUD.delete_by_id() method."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rowcount,expected", [(1, True), (0, False)])
    async def test_delete_by_id_should_report_result(
        self,
        base_crud: BaseCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
        rowcount: int,
        expected: bool,
    ) -> None:
        """Test delete_by_id returns whether a row was removed."""
        # Arrange
        mock_result = MagicMock()
        mock_result.rowcount = rowcount
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        deleted = await base_crud.delete_by_id(mock_session, sample_id)

        # Assert
        assert deleted is expected

