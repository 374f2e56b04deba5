"""
Question API endpoints.

Routes:
- POST /questions/add - Append questions to an existing session
- POST /questions/{id}/pin - Toggle the pinned flag
- POST /questions/{id}/note - Replace the note

Dependencies: interview_prep.application.services, interview_prep.models
System role: Question management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from interview_prep.api.deps import (
    get_current_user_id,
    get_question_service,
    get_session_service,
)
from interview_prep.application.services.question_service import QuestionService
from interview_prep.application.services.session_service import SessionService
from interview_prep.models.question import (
    AddQuestionsRequest,
    CreatedQuestionsResponse,
    NoteRequest,
    QuestionEnvelope,
    QuestionResponse,
)

from .router_utils import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/questions",
    tags=["questions"],
    dependencies=[Depends(get_current_user_id)],
)


@router.post("/add", response_model=CreatedQuestionsResponse, status_code=201)
@handle_api_errors()
async def add_questions(
    request: AddQuestionsRequest,
    session_service: SessionService = Depends(get_session_service),
) -> CreatedQuestionsResponse:
    """
    Append generated questions to the end of a session.

    Args:
        request: Target session id and question pairs
        session_service: Injected SessionService

    Returns:
        CreatedQuestionsResponse: The stored questions

    Raises:
        400: Session id or questions missing
        404: Session not found
    """
    questions = (
        [q.model_dump() for q in request.questions]
        if request.questions is not None
        else None
    )
    created = await session_service.append_questions(request.session_id, questions)
    return CreatedQuestionsResponse(
        created_questions=[QuestionResponse(**q) for q in created]
    )


@router.post("/{question_id}/pin", response_model=QuestionEnvelope)
@handle_api_errors()
async def toggle_pin(
    question_id: str,
    question_service: QuestionService = Depends(get_question_service),
) -> QuestionEnvelope:
    """
    Flip the pinned flag of a question.

    Raises:
        404: Question not found
    """
    question = await question_service.toggle_pin(question_id)
    return QuestionEnvelope(
        message="Question pinned successfully",
        question=QuestionResponse(**question),
    )


@router.post("/{question_id}/note", response_model=QuestionEnvelope)
@handle_api_errors()
async def update_note(
    question_id: str,
    request: NoteRequest | None = None,
    question_service: QuestionService = Depends(get_question_service),
) -> QuestionEnvelope:
    """
    Replace the note of a question. An omitted note or body clears it.

    Raises:
        404: Question not found
    """
    question = await question_service.update_note(
        question_id, request.note if request else None
    )
    return QuestionEnvelope(
        message="Question note updated successfully",
        question=QuestionResponse(**question),
    )
