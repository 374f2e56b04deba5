"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, fake chat model, bearer tokens,
service mocks
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core, jwt
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock

import jwt
import pytest
from langchain_core.messages import AIMessage


class FakeChatModel:
    """Stand-in for the Gemini chat model returning canned replies."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from interview_prep.boundary.db.create_tables import create_all_tables, drop_all_tables

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    await create_all_tables(engine)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    await drop_all_tables(engine)

    await engine.dispose()


@pytest.fixture
def make_chat_model():
    """Provide the fake chat model class for canned replies."""
    return FakeChatModel


@pytest.fixture
def user_id() -> str:
    """Generate a test user ID."""
    return uuid.uuid4().hex[:24]


@pytest.fixture
def make_token():
    """
    Build bearer tokens signed with the configured secret.

    Returns:
        Callable: (user_id, secret=None) -> encoded JWT
    """
    from interview_prep.configs import get_settings

    auth = get_settings().auth

    def _make(user_id: str, secret: str | None = None) -> str:
        return jwt.encode({"id": user_id}, secret or auth.secret_key, algorithm=auth.algorithm)

    return _make


@pytest.fixture
def auth_headers(make_token, user_id) -> dict:
    """Authorization header for the test user."""
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def mock_session_service():
    """
    Create mock SessionService for testing.

    Returns:
        AsyncMock: Mocked SessionService with async methods
    """
    service = AsyncMock()
    service.db = AsyncMock()
    return service


@pytest.fixture
def mock_question_service():
    """
    Create mock QuestionService for testing.

    Returns:
        AsyncMock: Mocked QuestionService with async methods
    """
    return AsyncMock()


@pytest.fixture
def session_id():
    """Generate a test session ID."""
    return uuid.uuid4()


@pytest.fixture
def question_id():
    """Generate a test question ID."""
    return uuid.uuid4()
