import uuid
from datetime import datetime, timezone

from interview_prep.application.services.serializers import (
    parse_uuid,
    question_to_dict,
    session_to_dict,
)
from interview_prep.boundary.db.models import QuestionModel, SessionModel


def test_parse_uuid_accepts_uuid_and_string():
    value = uuid.uuid4()

    assert parse_uuid(value) is value
    assert parse_uuid(str(value)) == value


def test_parse_uuid_rejects_garbage():
    assert parse_uuid("not-a-uuid") is None
    assert parse_uuid(None) is None


def test_session_to_dict_uses_given_question_order():
    now = datetime.now(timezone.utc)
    session = SessionModel(
        id=uuid.uuid4(),
        owner_id="user-1",
        role="Backend Engineer",
        experience="3",
        topics_to_focus="SQL",
        description="",
        created_at=now,
        updated_at=now,
    )
    questions = [
        QuestionModel(
            id=uuid.uuid4(),
            session_id=session.id,
            question=text,
            answer="A",
            note=None,
            is_pinned=False,
            position=index,
            created_at=now,
            updated_at=now,
        )
        for index, text in enumerate(["Q1", "Q2"])
    ]

    data = session_to_dict(session, reversed(questions))

    assert data["owner_id"] == "user-1"
    assert [q["question"] for q in data["questions"]] == ["Q2", "Q1"]
    assert data["questions"][0]["session_id"] == session.id
    assert question_to_dict(questions[0])["note"] == ""
