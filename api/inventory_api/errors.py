"""
Error types raised by the route handlers.

Every error is rendered as {"message": ..., "error": ...}, "error" being
omitted when there is nothing to add to the message.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.error = error

class InvalidInputError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

class PersistenceError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, error: Optional[Any] = None) -> dict:
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return body


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    error = exc.error
    # Storage errors carry the driver's message, which may be hidden
    if isinstance(exc, PersistenceError) and not request.app.state.settings.expose_error_details:
        error = None
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, error))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request.", jsonable_encoder(errors)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error."),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
