"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: interview_prep.configs, interview_prep.application, interview_prep.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from interview_prep.application.services import QuestionService, SessionService
from interview_prep.boundary.db import get_async_db
from interview_prep.configs import Settings, get_settings
from interview_prep.core.generation import GenerationGateway, build_chat_model


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._generation_gateway = None

    @property
    def generation_gateway(self) -> GenerationGateway:
        """Get cached generation gateway wrapping the Gemini chat model."""
        if self._generation_gateway is None:
            gemini = get_settings().gemini
            self._generation_gateway = GenerationGateway(
                chat_model=build_chat_model(gemini),
                max_questions=gemini.max_questions,
            )
        return self._generation_gateway

    def clear(self) -> None:
        """Clear all cached instances."""
        self._generation_gateway = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_question_service(db: AsyncSession = Depends(get_async_db)) -> QuestionService:
    """
    Get question service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        QuestionService: Question service instance
    """
    return QuestionService(db=db)


def get_generation_gateway() -> GenerationGateway:
    """
    Get generation gateway instance.

    Returns:
        GenerationGateway: Gateway built once from Gemini settings
    """
    return get_service_cache().generation_gateway
