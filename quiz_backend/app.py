"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_error_handlers, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_ECHO,
    DB_RESET,
    DB_TIMEOUT_SECONDS,
    LOG_LEVEL,
    build_engine,
    configure_logging,
)

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None, *, reset: bool = DB_RESET) -> FastAPI:
    """Build the app. The store is opened at startup and disposed at shutdown."""

    configure_logging(LOG_LEVEL)
    url = database_url or DATABASE_URL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(url, timeout=DB_TIMEOUT_SECONDS, echo=DB_ECHO)
        if reset:
            SQLModel.metadata.drop_all(engine)
        SQLModel.metadata.create_all(engine)
        app.state.engine = engine
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database connections closed")

    app = FastAPI(title="Trivia Quiz API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("quiz_backend.app:app", host="127.0.0.1", port=5000, reload=True)
