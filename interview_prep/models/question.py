"""
Question domain models and schemas.

Request/response schemas for question operations. Wire names are camelCase.

Dependencies: pydantic
System role: Question API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class QuestionPair(BaseModel):
    """One generated question with its answer, as posted by clients."""

    question: str
    answer: str


class AddQuestionsRequest(BaseModel):
    """Request schema for appending questions to a session."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(None, alias="sessionId", description="Target session id")
    questions: list[QuestionPair] | None = Field(None, description="Pairs to append")


class NoteRequest(BaseModel):
    """Request schema for replacing a question note."""

    note: str | None = Field(None, description="Note text; omitted or null clears it")


class QuestionResponse(BaseModel):
    """Response schema for question operations."""

    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    session_id: uuid.UUID = Field(alias="session")
    question: str
    answer: str
    note: str = ""
    is_pinned: bool = Field(False, alias="isPinned")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class QuestionEnvelope(BaseModel):
    """Envelope returned by pin and note updates."""

    success: bool = True
    message: str
    question: QuestionResponse


class CreatedQuestionsResponse(BaseModel):
    """Envelope returned after appending questions."""

    model_config = ConfigDict(populate_by_name=True)

    created_questions: list[QuestionResponse] = Field(alias="createdQuestions")
