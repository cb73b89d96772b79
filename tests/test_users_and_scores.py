import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from quiz_backend.core.errors import InvalidInput, StorageUnavailable
from quiz_backend.models import ScoreRecord, User
from quiz_backend.services import users
from quiz_backend.services.scores import record_score
from quiz_backend.services.users import resolve_user


def test_resolve_creates_user_once(session):
    first = resolve_user(session, "Dhoni")
    second = resolve_user(session, "Dhoni")

    assert first == second
    assert len(session.exec(select(User)).all()) == 1


def test_resolve_trims_but_keeps_case(session):
    trimmed = resolve_user(session, "  Dhoni ")
    other_case = resolve_user(session, "dhoni")

    assert trimmed == resolve_user(session, "Dhoni")
    assert other_case != trimmed


def test_resolve_rejects_blank_and_long_names(session):
    with pytest.raises(InvalidInput):
        resolve_user(session, "   ")
    with pytest.raises(InvalidInput):
        resolve_user(session, "x" * 51)


def test_resolve_reuses_row_created_by_concurrent_request(engine, monkeypatch):
    with Session(engine) as winner:
        winner_id = resolve_user(winner, "Dhoni")

    real_find = users._find_user_id
    calls = []

    def lookup_before_winner_committed(session, name):
        calls.append(name)
        if len(calls) == 1:
            return None
        return real_find(session, name)

    monkeypatch.setattr(users, "_find_user_id", lookup_before_winner_committed)

    with Session(engine) as loser:
        assert resolve_user(loser, "Dhoni") == winner_id

    with Session(engine) as check:
        assert len(check.exec(select(User)).all()) == 1
    assert len(calls) == 2


def test_record_score_appends_rows(session):
    user_id = resolve_user(session, "Raj")

    first = record_score(session, user_id, "History", 60)
    second = record_score(session, user_id, "History", 60)

    assert first != second
    rows = session.exec(select(ScoreRecord).order_by(ScoreRecord.id)).all()
    assert [(row.user_id, row.category, row.score) for row in rows] == [
        (user_id, "History", 60),
        (user_id, "History", 60),
    ]
    assert rows[0].created_at <= rows[1].created_at


@pytest.mark.parametrize("bad_score", [-1, 101, 50.5, True])
def test_record_score_rejects_out_of_range(session, bad_score):
    user_id = resolve_user(session, "Raj")
    with pytest.raises(InvalidInput):
        record_score(session, user_id, "History", bad_score)


def test_record_score_requires_category(session):
    user_id = resolve_user(session, "Raj")
    with pytest.raises(InvalidInput):
        record_score(session, user_id, "  ", 50)


class _BrokenSession:
    def exec(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    def add(self, *args, **kwargs):
        pass

    def commit(self):
        raise OperationalError("INSERT", {}, Exception("database is locked"))


def test_storage_failures_surface_as_storage_unavailable():
    with pytest.raises(StorageUnavailable):
        resolve_user(_BrokenSession(), "Raj")
    with pytest.raises(StorageUnavailable):
        record_score(_BrokenSession(), 1, "History", 50)
