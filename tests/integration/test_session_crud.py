"""
Test suite for SessionCRUD database operations.

Tests session-specific CRUD methods including eager loading of questions
and owner-scoped listing. Uses async fixtures with SQLAlchemy mocking.

System role: Verification of session persistence layer
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Text
from sqlalchemy.ext.asyncio import AsyncSession

from interview_prep.boundary.db.CRUD.session_crud import SessionCRUD
from interview_prep.boundary.db.models.session_model import SessionModel


@pytest.fixture
def session_crud() -> SessionCRUD:
    """Provide SessionCRUD instance for testing."""
    return SessionCRUD()


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def sample_id() -> uuid.UUID:
    """Provide sample UUID for testing."""
    return uuid.uuid4()


@pytest.fixture
def mock_session_model(sample_id: uuid.UUID) -> SessionModel:
    """Provide SessionModel instance."""
    session = SessionModel(
        owner_id="user-1",
        role="Backend Engineer",
        experience="3",
        topics_to_focus="SQL",
        description="",
    )
    session.id = sample_id
    session.created_at = datetime.now(timezone.utc)
    session.updated_at = datetime.now(timezone.utc)
    return session


class TestSessionCRUDInit:
    """Test suite for SessionCRUD initialization."""

    def test_init_should_set_model_to_session_model(self) -> None:
        """Test SessionCRUD initializes with SessionModel."""
        # Act
        crud = SessionCRUD()

        # Assert
        assert crud.model == SessionModel


class TestSessionCRUDGetWithQuestions:
    """Test suite for SessionCRUD.get_with_questions() method."""

    @pytest.mark.asyncio
    async def test_get_with_questions_should_return_session(
        self,
        session_crud: SessionCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
        mock_session_model: SessionModel,
    ) -> None:
        """Test get_with_questions returns the loaded session."""
        # Arrange
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=mock_session_model)
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await session_crud.get_with_questions(mock_session, sample_id)

        # Assert
        assert result == mock_session_model
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_with_questions_should_return_none_when_not_found(
        self,
        session_crud: SessionCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
    ) -> None:
        """Test get_with_questions returns None when session doesn't exist."""
        # Arrange
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await session_crud.get_with_questions(mock_session, sample_id)

        # Assert
        assert result is None


class TestSessionCRUDGetByOwner:
    """Test suite for SessionCRUD.get_by_owner_with_questions() method."""

    @pytest.mark.asyncio
    async def test_get_by_owner_should_filter_and_order(
        self,
        session_crud: SessionCRUD,
        mock_session: AsyncSession,
        mock_session_model: SessionModel,
    ) -> None:
        """Test owner query filters by owner_id and orders newest first."""
        # Arrange
        mock_scalars = MagicMock()
        mock_scalars.all = MagicMock(return_value=[mock_session_model])
        mock_result = MagicMock()
        mock_result.scalars = MagicMock(return_value=mock_scalars)
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await session_crud.get_by_owner_with_questions(mock_session, "user-1")

        # Assert
        assert result == [mock_session_model]
        stmt = mock_session.execute.call_args.args[0]
        compiled = str(stmt)
        assert "interview_sessions.owner_id" in compiled
        assert "ORDER BY interview_sessions.created_at DESC" in compiled


class TestSessionModelColumns:
    """Test suite for SessionModel column definitions."""

    @pytest.mark.parametrize(
        "column", ["owner_id", "role", "experience", "topics_to_focus", "description"]
    )
    def test_free_text_columns_have_no_length_limit(self, column: str) -> None:
        """Test user-supplied text columns are unbounded Text."""
        column_type = SessionModel.__table__.c[column].type

        assert isinstance(column_type, Text)
        assert column_type.length is None
