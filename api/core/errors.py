"""
Public error type and storage-error mapping.

Handlers and services raise `ApiError` for anything the caller should see.
Database exceptions that escape a service are translated through
`STORAGE_ERROR_MAP` so driver messages, SQL and constraint details never
reach the response body.
"""

from __future__ import annotations

import asyncio
import logging

from asyncpg import exceptions as pg_errors
from asyncpg.exceptions import _base as pg_base
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str, *, plain: bool = False) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.plain = plain

    def to_response(self) -> Response:
        if self.plain:
            return PlainTextResponse(self.message, status_code=self.status_code)
        return JSONResponse({"error": self.message}, status_code=self.status_code)


# First match wins, so subclasses come before their bases.
STORAGE_ERROR_MAP: list[tuple[type[BaseException], int, str]] = [
    (pg_errors.UniqueViolationError, 409, "Resource already exists."),
    (pg_errors.ForeignKeyViolationError, 409, "Referenced resource does not exist."),
    (pg_errors.IntegrityConstraintViolationError, 409, "Constraint violation."),
    (pg_errors.DataError, 400, "Invalid input."),
    (pg_errors.CannotConnectNowError, 503, "Database unavailable."),
    # Raised by the driver itself, e.g. an argument outside int4 range.
    (pg_base.DataError, 400, "Invalid input."),
    (pg_errors.InterfaceError, 503, "Database unavailable."),
    (asyncio.TimeoutError, 503, "Database unavailable."),
    (OSError, 503, "Database unavailable."),
    (pg_errors.PostgresError, 500, "Database error."),
]


def map_storage_error(exc: BaseException) -> ApiError:
    for exc_type, status_code, message in STORAGE_ERROR_MAP:
        if isinstance(exc, exc_type):
            return ApiError(status_code, message)
    return ApiError(500, "Database error.")


def constraint_name(exc: BaseException) -> str:
    return str(getattr(exc, "constraint_name", None) or "")


async def _api_error_handler(_: Request, exc: ApiError) -> Response:
    return exc.to_response()


async def _storage_error_handler(request: Request, exc: Exception) -> Response:
    error = map_storage_error(exc)
    logger.exception(
        "storage_error method=%s path=%s status=%s kind=%s",
        request.method,
        request.url.path,
        error.status_code,
        type(exc).__name__,
        exc_info=exc,
    )
    return error.to_response()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(pg_errors.PostgresError, _storage_error_handler)
    app.add_exception_handler(pg_errors.InterfaceError, _storage_error_handler)
    app.add_exception_handler(asyncio.TimeoutError, _storage_error_handler)
    app.add_exception_handler(OSError, _storage_error_handler)
