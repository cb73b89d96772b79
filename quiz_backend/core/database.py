"""Database engine construction and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

# Largest value a signed 64-bit INTEGER column can bind.
SQL_INTEGER_MAX = 2**63 - 1


def build_engine(url: str, *, timeout: int = 5, echo: bool = False) -> Engine:
    """Create the engine for ``url``, bounding each store wait by ``timeout`` seconds."""

    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(
            url, echo=echo, pool_timeout=timeout, pool_pre_ping=True
        )

    connect_args = {"check_same_thread": False, "timeout": timeout}
    if parsed.database in (None, "", ":memory:"):
        return create_engine(
            url, echo=echo, connect_args=connect_args, poolclass=StaticPool
        )

    Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=echo, connect_args=connect_args)


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a session bound to the app's engine."""

    with Session(request.app.state.engine) as session:
        yield session


__all__ = ["SQL_INTEGER_MAX", "build_engine", "get_session"]
