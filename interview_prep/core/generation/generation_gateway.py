"""
Generation gateway.

Stateless adapter around a LangChain chat model (Google Gemini). Formats
the prompt, sends one request, and turns the reply into validated records.
Nothing is persisted and nothing is retried.

Dependencies: langchain_core, langchain_google_genai, pydantic
System role: Boundary to the external text-generation API
"""

import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import ValidationError as SchemaValidationError

from interview_prep.configs.llm import GeminiSettings
from interview_prep.core.exceptions import (
    ServiceError,
    UpstreamFormatError,
    ValidationError,
)
from interview_prep.core.generation.generation_prompt import (
    CONCEPT_EXPLAIN_PROMPT,
    QUESTION_ANSWER_PROMPT,
)
from interview_prep.core.generation.generation_schema import (
    ConceptExplanation,
    GeneratedQuestionList,
)
from interview_prep.core.generation.response_parser import parse_json_reply

logger = logging.getLogger(__name__)


def build_chat_model(settings: GeminiSettings) -> ChatGoogleGenerativeAI:
    """
    Create the Gemini chat model from settings.

    Args:
        settings: Gemini configuration

    Returns:
        ChatGoogleGenerativeAI: Configured chat model
    """
    logger.info(f"Initializing Gemini chat model {settings.model}")
    return ChatGoogleGenerativeAI(
        model=settings.model,
        temperature=settings.temperature,
        google_api_key=settings.api_key or None,
    )


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _message_text(content: Any) -> str:
    """Flatten chat message content (string or list of parts) to text."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GenerationGateway:
    """Gateway to the external generation model.

    Usage:
        gateway = GenerationGateway(chat_model=build_chat_model(settings.gemini))
        pairs = await gateway.generate_questions("Backend Engineer", "3", "SQL", 5)
    """

    def __init__(self, chat_model: BaseChatModel, max_questions: int = 20) -> None:
        """
        Initialize gateway with an injected chat model.

        Args:
            chat_model: Any LangChain chat model exposing ainvoke
            max_questions: Upper bound on questions per request
        """
        self.chat_model = chat_model
        self.max_questions = max_questions

    async def generate_questions(
        self,
        role: str | None,
        experience: str | None,
        topics_to_focus: str | None,
        number_of_questions: int | None,
    ) -> list[dict]:
        """
        Generate interview question/answer pairs.

        Args:
            role: Target job role
            experience: Candidate experience in years
            topics_to_focus: Topics to focus on
            number_of_questions: How many pairs to generate

        Returns:
            list[dict]: Pairs with "question" and "answer" keys

        Raises:
            ValidationError: If a parameter is missing or out of range
            ServiceError: If the model call fails
            UpstreamFormatError: If the reply is not the expected JSON array
        """
        required = {
            "role": role,
            "experience": experience,
            "topicsToFocus": topics_to_focus,
            "numberOfQuestions": number_of_questions,
        }
        for field, value in required.items():
            if _is_blank(value):
                raise ValidationError(field=field)
        if not 0 < number_of_questions <= self.max_questions:
            raise ValidationError(
                f"numberOfQuestions must be between 1 and {self.max_questions}",
                field="numberOfQuestions",
            )

        messages = QUESTION_ANSWER_PROMPT.format_messages(
            role=role,
            experience=experience,
            topics_to_focus=topics_to_focus,
            number_of_questions=number_of_questions,
        )
        reply = await self._complete(messages, "Failed to generate questions")

        try:
            questions = GeneratedQuestionList.validate_python(parse_json_reply(reply))
        except SchemaValidationError as e:
            logger.warning("Question reply has unexpected shape", extra={"error": str(e)})
            raise UpstreamFormatError() from e

        logger.info(
            "Generated interview questions",
            extra={"requested": number_of_questions, "received": len(questions)},
        )
        return [q.model_dump() for q in questions]

    async def generate_explanation(self, question: str | None) -> dict:
        """
        Generate an in-depth explanation for one question.

        Args:
            question: Interview question text

        Returns:
            dict: Explanation with "title" and "explanation" keys

        Raises:
            ValidationError: If question is missing
            ServiceError: If the model call fails
            UpstreamFormatError: If the reply is not the expected JSON object
        """
        if _is_blank(question):
            raise ValidationError(field="question")

        messages = CONCEPT_EXPLAIN_PROMPT.format_messages(question=question)
        reply = await self._complete(messages, "Failed to generate explanation")

        data = parse_json_reply(reply)
        # Some replies wrap the object in a one-element array
        if isinstance(data, list) and len(data) == 1:
            data = data[0]

        try:
            explanation = ConceptExplanation.model_validate(data)
        except SchemaValidationError as e:
            logger.warning("Explanation reply has unexpected shape", extra={"error": str(e)})
            raise UpstreamFormatError() from e

        return explanation.model_dump()

    async def _complete(self, messages: list, failure_message: str) -> str:
        """Send one request to the chat model and return its text."""
        try:
            response = await self.chat_model.ainvoke(messages)
        except Exception as e:
            logger.error(
                f"{failure_message}: {type(e).__name__}: {e}",
                extra={"error_type": type(e).__name__},
            )
            raise ServiceError(failure_message, error=str(e)) from e
        return _message_text(response.content)
