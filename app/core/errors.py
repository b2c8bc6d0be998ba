"""Error taxonomy and the handlers that turn it into JSON responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base for errors surfaced to the client as status + message."""

    status_code = 500
    code = "AppError"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(AppError):
    status_code = 400
    code = "InvalidInput"
    default_message = "Invalid input."


class DuplicateIdentity(AppError):
    status_code = 400
    code = "DuplicateIdentity"
    default_message = "User already exists."


class NotFound(AppError):
    status_code = 404
    code = "NotFound"
    default_message = "User not found"


class InvalidCredentials(AppError):
    status_code = 401
    code = "InvalidCredentials"
    default_message = "Invalid password"


class Unauthenticated(AppError):
    status_code = 401
    code = "Unauthenticated"
    default_message = "Access denied. No token provided."


class Forbidden(AppError):
    status_code = 403
    code = "Forbidden"
    default_message = "Invalid or expired token."


class StoreFailure(AppError):
    status_code = 500
    code = "StoreFailure"


def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = None
    return error_response(InvalidInput(message))


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # details go to the log only
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return error_response(StoreFailure())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
