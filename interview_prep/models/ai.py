"""
Generation request/response schemas.

Dependencies: pydantic
System role: Generation API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class GenerateQuestionsRequest(BaseModel):
    """Request schema for question generation."""

    model_config = ConfigDict(populate_by_name=True)

    role: str | None = Field(None, description="Target job role")
    experience: str | int | None = Field(None, description="Years of experience")
    topics_to_focus: str | None = Field(None, alias="topicsToFocus", description="Focus topics")
    number_of_questions: int | None = Field(
        None, alias="numberOfQuestions", description="How many pairs to generate"
    )


class GenerateExplanationRequest(BaseModel):
    """Request schema for concept explanation."""

    question: str | None = Field(None, description="Interview question to explain")


class GeneratedQuestionResponse(BaseModel):
    """One generated question/answer pair."""

    question: str
    answer: str


class ExplanationResponse(BaseModel):
    """Generated explanation with a short title."""

    title: str
    explanation: str
