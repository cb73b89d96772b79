"""Mapping of service errors onto HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import QuizError, StorageUnavailable

logger = logging.getLogger(__name__)


async def _quiz_error_handler(request: Request, exc: QuizError) -> JSONResponse:
    if isinstance(exc, StorageUnavailable):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        {"detail": "Malformed request", "errors": _jsonable_errors(exc)},
        status_code=400,
    )


def _jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Report 400 for bad input, 404 for empty results and 500 for storage failures."""

    app.add_exception_handler(QuizError, _quiz_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)


__all__ = ["register_error_handlers"]
