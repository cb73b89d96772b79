"""Display-name to user identity resolution."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core.errors import InvalidInput, StorageUnavailable, storage_guard
from ..models import NAME_MAX_LENGTH, User

logger = logging.getLogger(__name__)


def normalize_user_name(name: object) -> str:
    """Trim an inbound display name and enforce the storage rules."""

    if not isinstance(name, str) or not name.strip():
        raise InvalidInput("Name is required")
    cleaned = name.strip()
    if len(cleaned) > NAME_MAX_LENGTH:
        raise InvalidInput(f"Name must be {NAME_MAX_LENGTH} characters or less")
    return cleaned


def _find_user_id(session: Session, name: str) -> Optional[int]:
    return session.exec(select(User.id).where(User.name == name)).first()


def resolve_user(session: Session, name: str) -> int:
    """Return the id of the user called ``name``, creating the row if needed.

    When a concurrent request creates the same name first, the unique
    constraint rejects our insert and the winner's id is looked up once more.
    """

    name = normalize_user_name(name)

    with storage_guard("resolve user"):
        user_id = _find_user_id(session, name)
        if user_id is not None:
            return user_id

        user = User(name=name)
        session.add(user)
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.warning("User %r was created concurrently; reusing existing row", name)
            user_id = _find_user_id(session, name)
            if user_id is None:
                raise StorageUnavailable("resolve user")
            return user_id

        session.refresh(user)
        logger.info("Created user %r (id=%s)", name, user.id)
        return user.id


__all__ = ["normalize_user_name", "resolve_user"]
