"""Exception handlers rendering every failure in the response envelope."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette import status
from starlette.exceptions import HTTPException

from worklog.domain.exceptions import WorklogError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_envelope(message: str, *, data: Any | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"status": "error", "message": message}
    if data is not None:
        payload["data"] = data
    return payload


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(WorklogError)
    async def _handle_domain_error(request: Request, exc: WorklogError) -> JSONResponse:
        logger.warning(
            "%s %s failed (%s): %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.message))

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        logger.info("validation error: %s", errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope("Request validation failed", data={"errors": errors}),
        )

    @app.exception_handler(HTTPException)
    async def _handle_http_error(_: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def _handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(
            "database error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(INTERNAL_ERROR_MESSAGE),
        )

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unexpected error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(INTERNAL_ERROR_MESSAGE),
        )


__all__ = ["error_envelope", "register_exception_handlers"]
