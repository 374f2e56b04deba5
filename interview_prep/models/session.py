"""
Session domain models and schemas.

Request/response schemas for session operations. Wire names are camelCase.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from interview_prep.models.question import QuestionPair, QuestionResponse


class CreateSessionRequest(BaseModel):
    """Request schema for creating a session with its generated questions."""

    model_config = ConfigDict(populate_by_name=True)

    role: str | None = Field(None, description="Target job role")
    experience: str | int | None = Field(None, description="Years of experience")
    topics_to_focus: str | None = Field(
        None, alias="topicsToFocus", description="Comma-separated focus topics"
    )
    description: str | None = Field(None, description="Optional free-text description")
    questions: list[QuestionPair] | None = Field(None, description="Generated pairs to store")


class SessionResponse(BaseModel):
    """Response schema for session operations."""

    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    role: str
    experience: str
    topics_to_focus: str = Field(alias="topicsToFocus")
    description: str = ""
    owner_id: str = Field(alias="user")
    questions: list[QuestionResponse] = Field(default_factory=list)
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class SessionEnvelope(BaseModel):
    """Envelope for a single session."""

    success: bool = True
    message: str
    session: SessionResponse


class SessionListEnvelope(BaseModel):
    """Envelope for the caller's sessions."""

    success: bool = True
    message: str
    sessions: list[SessionResponse]
