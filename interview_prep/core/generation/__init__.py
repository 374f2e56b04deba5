"""
Generation gateway package.

Prompt templates, response parsing and the Gemini-backed gateway used to
generate interview questions and concept explanations.
"""

from interview_prep.core.generation.generation_gateway import (
    GenerationGateway,
    build_chat_model,
)
from interview_prep.core.generation.generation_schema import (
    ConceptExplanation,
    GeneratedQuestion,
)

__all__ = [
    "ConceptExplanation",
    "GeneratedQuestion",
    "GenerationGateway",
    "build_chat_model",
]
