"""
Generation response schemas.

Shapes the model must reply with for question sets and explanations.

Dependencies: pydantic
System role: Gateway response schema definitions
"""

from pydantic import BaseModel, Field, TypeAdapter


class GeneratedQuestion(BaseModel):
    """One generated interview question with its answer."""

    question: str = Field(description="Interview question text")
    answer: str = Field(description="Model answer, may contain markdown code blocks")


class ConceptExplanation(BaseModel):
    """In-depth explanation of the concept behind a question."""

    title: str = Field(description="Short title summarising the concept")
    explanation: str = Field(description="Beginner-level explanation")


GeneratedQuestionList = TypeAdapter(list[GeneratedQuestion])
