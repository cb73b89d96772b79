from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from quiz_backend.app import create_app
from quiz_backend.core import build_engine
from quiz_backend.models import Question
from quiz_backend.services.scores import record_score
from quiz_backend.services.users import resolve_user

BASE_TIME = datetime(2025, 6, 14, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    with TestClient(create_app("sqlite://")) as client:
        yield client


@pytest.fixture
def app_session(client):
    with Session(client.app.state.engine) as session:
        yield session


def add_question(session, category="History", correct_answer="India", **overrides):
    fields = {
        "question_text": f"Question about {category}?",
        "category": category,
        "correct_answer": correct_answer,
        "option_1": correct_answer,
        "option_2": "Australia",
        "option_3": "England",
        "option_4": "Pakistan",
    }
    fields.update(overrides)
    question = Question(**fields)
    session.add(question)
    session.commit()
    session.refresh(question)
    return question


def add_score(session, name, category, score, minutes=0):
    user_id = resolve_user(session, name)
    return record_score(
        session, user_id, category, score, timestamp=BASE_TIME + timedelta(minutes=minutes)
    )
