"""
Common response models.

Envelope and error schemas shared by every router.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain success envelope without payload."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    message: str = Field(description="Human-readable error message")
    error: str | None = Field(default=None, description="Underlying error text")
