from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from interview_prep.api.deps import get_generation_gateway
from interview_prep.api.main import create_app
from interview_prep.core.exceptions import (
    ServiceError,
    UpstreamFormatError,
    ValidationError,
)
from interview_prep.core.generation import GenerationGateway


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_gateway():
    return AsyncMock(spec=GenerationGateway)


@pytest.fixture
def question_payload():
    return {
        "role": "Backend Engineer",
        "experience": "3",
        "topicsToFocus": "Node,SQL",
        "numberOfQuestions": 2,
    }


def test_generate_questions_returns_bare_array(client, mock_gateway, auth_headers, question_payload):
    mock_gateway.generate_questions.return_value = [
        {"question": "What is an index?", "answer": "A lookup structure."},
        {"question": "What is a join?", "answer": "Combines rows."},
    ]
    client.app.dependency_overrides[get_generation_gateway] = lambda: mock_gateway

    response = client.post("/api/ai/generate-questions", json=question_payload, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert isinstance(data, list)
    assert data[0] == {"question": "What is an index?", "answer": "A lookup structure."}
    mock_gateway.generate_questions.assert_awaited_once_with(
        role="Backend Engineer",
        experience="3",
        topics_to_focus="Node,SQL",
        number_of_questions=2,
    )


def test_generate_questions_missing_fields(client, mock_gateway, auth_headers):
    mock_gateway.generate_questions.side_effect = ValidationError(field="role")
    client.app.dependency_overrides[get_generation_gateway] = lambda: mock_gateway

    response = client.post("/api/ai/generate-questions", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Missing required fields"}


def test_generate_questions_upstream_failure(client, mock_gateway, auth_headers, question_payload):
    mock_gateway.generate_questions.side_effect = ServiceError(
        "Failed to generate questions", error="quota exceeded"
    )
    client.app.dependency_overrides[get_generation_gateway] = lambda: mock_gateway

    response = client.post("/api/ai/generate-questions", json=question_payload, headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Failed to generate questions",
        "error": "quota exceeded",
    }


def test_generate_questions_prose_reply(client, auth_headers, question_payload, make_chat_model):
    gateway = GenerationGateway(chat_model=make_chat_model("Sure! Here are some questions."))
    client.app.dependency_overrides[get_generation_gateway] = lambda: gateway

    response = client.post("/api/ai/generate-questions", json=question_payload, headers=auth_headers)

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Invalid JSON format in AI response"
    assert "Sure!" not in response.text


def test_generate_questions_unexpected_error(client, mock_gateway, auth_headers, question_payload):
    mock_gateway.generate_questions.side_effect = KeyError("boom")
    client.app.dependency_overrides[get_generation_gateway] = lambda: mock_gateway

    response = client.post("/api/ai/generate-questions", json=question_payload, headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to generate questions"


def test_generate_questions_requires_token(client, mock_gateway, question_payload):
    client.app.dependency_overrides[get_generation_gateway] = lambda: mock_gateway

    response = client.post("/api/ai/generate-questions", json=question_payload)

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Not authorized, no token"}
    mock_gateway.generate_questions.assert_not_called()


def test_generate_explanation(client, mock_gateway, auth_headers):
    mock_gateway.generate_explanation.return_value = {
        "title": "Database indexes",
        "explanation": "An index speeds up lookups.",
    }
    client.app.dependency_overrides[get_generation_gateway] = lambda: mock_gateway

    response = client.post(
        "/api/ai/generate-explanation",
        json={"question": "What is an index?"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {
        "title": "Database indexes",
        "explanation": "An index speeds up lookups.",
    }
    mock_gateway.generate_explanation.assert_awaited_once_with("What is an index?")


def test_generate_explanation_bad_json(client, mock_gateway, auth_headers):
    mock_gateway.generate_explanation.side_effect = UpstreamFormatError()
    client.app.dependency_overrides[get_generation_gateway] = lambda: mock_gateway

    response = client.post(
        "/api/ai/generate-explanation",
        json={"question": "What is an index?"},
        headers=auth_headers,
    )

    assert response.status_code == 500
    assert response.json()["message"] == "Invalid JSON format in AI response"
