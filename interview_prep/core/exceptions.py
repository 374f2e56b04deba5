"""
Exception hierarchy for the interview prep application.

Provides layered exception structure for domain-specific errors.
Every exception carries the HTTP status it maps to at the API boundary
and an optional underlying error message.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class InterviewPrepException(Exception):
    """Base exception for all interview prep application errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message, safe to show to clients
            error: Underlying error text (e.g. from a failed upstream call)
            details: Optional dictionary of additional context for logging
        """
        self.message = message
        self.error = error
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(InterviewPrepException):
    """Raised when required input is missing or malformed."""

    status_code = 400

    def __init__(
        self,
        message: str = "Missing required fields",
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details=details)


class NotFoundError(InterviewPrepException):
    """Raised when a referenced record does not exist."""

    status_code = 404


class SessionNotFoundError(NotFoundError):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["session_id"] = str(session_id)
        super().__init__("Session not found", details=details)


class QuestionNotFoundError(NotFoundError):
    """Raised when a question cannot be found."""

    def __init__(self, question_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["question_id"] = str(question_id)
        super().__init__("Question not found", details=details)


class UnauthorizedError(InterviewPrepException):
    """Raised when the caller is unauthenticated or does not own the resource."""

    status_code = 401


class UpstreamFormatError(InterviewPrepException):
    """Raised when the generation model replies with unusable JSON."""

    status_code = 500

    def __init__(
        self,
        message: str = "Invalid JSON format in AI response",
        details: dict[str, Any] | None = None,
    ) -> None:
        # The raw model reply never travels with this error
        super().__init__(message, details=details)


class ServiceError(InterviewPrepException):
    """Raised when a network, model or store operation fails."""

    status_code = 500
