"""
Generation API endpoints.

Routes:
- POST /ai/generate-questions - Generate interview question/answer pairs
- POST /ai/generate-explanation - Explain the concept behind one question

Nothing generated here is persisted.

Dependencies: interview_prep.core.generation, interview_prep.models
System role: Generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from interview_prep.api.deps import get_current_user_id, get_generation_gateway
from interview_prep.core.generation import GenerationGateway
from interview_prep.models.ai import (
    ExplanationResponse,
    GeneratedQuestionResponse,
    GenerateExplanationRequest,
    GenerateQuestionsRequest,
)

from .router_utils import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/ai",
    tags=["ai"],
    dependencies=[Depends(get_current_user_id)],
)


@router.post("/generate-questions", response_model=list[GeneratedQuestionResponse])
@handle_api_errors("Failed to generate questions")
async def generate_questions(
    request: GenerateQuestionsRequest,
    gateway: GenerationGateway = Depends(get_generation_gateway),
) -> list[GeneratedQuestionResponse]:
    """
    Generate interview questions for a role and topic set.

    Args:
        request: Role, experience, focus topics and question count
        gateway: Injected GenerationGateway

    Returns:
        list[GeneratedQuestionResponse]: Generated pairs

    Raises:
        400: Missing or out-of-range parameter
        500: Model call failed or reply was not valid JSON
    """
    logger.info(
        "Generating questions",
        extra={"role": request.role, "number_of_questions": request.number_of_questions},
    )
    pairs = await gateway.generate_questions(
        role=request.role,
        experience=request.experience,
        topics_to_focus=request.topics_to_focus,
        number_of_questions=request.number_of_questions,
    )
    return [GeneratedQuestionResponse(**pair) for pair in pairs]


@router.post("/generate-explanation", response_model=ExplanationResponse)
@handle_api_errors("Failed to generate explanation")
async def generate_explanation(
    request: GenerateExplanationRequest,
    gateway: GenerationGateway = Depends(get_generation_gateway),
) -> ExplanationResponse:
    """
    Generate a beginner-level explanation for one interview question.

    Args:
        request: Question text
        gateway: Injected GenerationGateway

    Returns:
        ExplanationResponse: Title and explanation
    """
    explanation = await gateway.generate_explanation(request.question)
    return ExplanationResponse(**explanation)
