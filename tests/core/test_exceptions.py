from interview_prep.core.exceptions import (
    InterviewPrepException,
    NotFoundError,
    QuestionNotFoundError,
    ServiceError,
    SessionNotFoundError,
    UnauthorizedError,
    UpstreamFormatError,
    ValidationError,
)


def test_status_codes():
    assert InterviewPrepException("x").status_code == 500
    assert ValidationError().status_code == 400
    assert SessionNotFoundError("abc").status_code == 404
    assert QuestionNotFoundError("abc").status_code == 404
    assert UnauthorizedError("no").status_code == 401
    assert UpstreamFormatError().status_code == 500
    assert ServiceError("boom").status_code == 500


def test_not_found_subclasses():
    assert issubclass(SessionNotFoundError, NotFoundError)
    assert issubclass(QuestionNotFoundError, NotFoundError)


def test_validation_error_records_field():
    exc = ValidationError(field="role")
    assert exc.message == "Missing required fields"
    assert exc.details == {"field": "role"}
    assert "role" in str(exc)


def test_service_error_keeps_underlying_error():
    exc = ServiceError("Failed to generate questions", error="quota exceeded")
    assert exc.error == "quota exceeded"
    assert str(exc) == "Failed to generate questions"
