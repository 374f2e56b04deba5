"""
Session API endpoints.

Routes:
- POST /sessions/create - Create session with its generated questions
- GET /sessions/my-sessions - List the caller's sessions
- GET /sessions/{id} - Get single session, pinned questions first
- DELETE /sessions/{id} - Delete session and its questions (owner only)

Dependencies: interview_prep.application.services, interview_prep.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from interview_prep.api.deps import get_current_user_id, get_session_service
from interview_prep.application.services.session_service import SessionService
from interview_prep.models.common import MessageResponse
from interview_prep.models.session import (
    CreateSessionRequest,
    SessionEnvelope,
    SessionListEnvelope,
    SessionResponse,
)

from .router_utils import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("/create", response_model=SessionEnvelope, status_code=201)
@handle_api_errors()
async def create_session(
    request: CreateSessionRequest,
    user_id: str = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
) -> SessionEnvelope:
    """
    Create a session and store the questions generated for it.

    Args:
        request: Session parameters and generated question pairs
        user_id: Authenticated caller (injected)
        session_service: Injected SessionService

    Returns:
        SessionEnvelope: Created session with its questions

    Raises:
        400: Role, experience or focus topics missing
        500: Creation failed
    """
    session_data = await session_service.create_session(
        role=request.role,
        experience=request.experience,
        topics_to_focus=request.topics_to_focus,
        description=request.description,
        questions=[q.model_dump() for q in request.questions or []],
        owner_id=user_id,
    )
    return SessionEnvelope(
        message="Session created successfully",
        session=SessionResponse(**session_data),
    )


@router.get("/my-sessions", response_model=SessionListEnvelope)
@handle_api_errors()
async def list_my_sessions(
    user_id: str = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
) -> SessionListEnvelope:
    """
    List the caller's sessions, newest first.

    Args:
        user_id: Authenticated caller (injected)
        session_service: Injected SessionService

    Returns:
        SessionListEnvelope: Sessions with their questions
    """
    sessions = await session_service.list_sessions_for_owner(user_id)
    logger.info("Listed sessions", extra={"owner_id": user_id, "count": len(sessions)})
    return SessionListEnvelope(
        message="Sessions fetched successfully",
        sessions=[SessionResponse(**s) for s in sessions],
    )


@router.get("/{session_id}", response_model=SessionEnvelope)
@handle_api_errors()
async def get_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
) -> SessionEnvelope:
    """
    Get one session with pinned questions first, each group newest first.

    Args:
        session_id: Session UUID
        user_id: Authenticated caller (injected)
        session_service: Injected SessionService

    Returns:
        SessionEnvelope: Session with sorted questions

    Raises:
        404: Session not found
    """
    session_data = await session_service.get_session(session_id)
    return SessionEnvelope(
        message="Session fetched successfully",
        session=SessionResponse(**session_data),
    )


@router.delete("/{session_id}", response_model=MessageResponse)
@handle_api_errors()
async def delete_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Delete a session together with all of its questions.

    Args:
        session_id: Session UUID
        user_id: Authenticated caller (injected)
        session_service: Injected SessionService

    Returns:
        MessageResponse: Deletion confirmation

    Raises:
        401: Caller does not own the session
        404: Session not found
    """
    await session_service.delete_session(session_id, requester_id=user_id)
    return MessageResponse(message="Session deleted successfully")
