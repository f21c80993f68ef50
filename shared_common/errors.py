"""Translation of service errors into HTTP responses.

Both services share ``error_response`` and install it on their FastAPI app
with ``register_exception_handlers``.
"""
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import (
    InternalError,
    InvalidReferenceError,
    NotFoundError,
    RemoteValidationError,
    ServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input data provided"
INVALID_PARAMETER_MESSAGE = "Invalid parameter type"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

STATUS_BY_ERROR = {
    NotFoundError: 404,
    InvalidReferenceError: 400,
    RemoteValidationError: 400,
    ValidationError: 400,
    InternalError: 500,
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ErrorResponse(BaseModel):
    """Uniform body of every 4xx/5xx response."""
    error: str = Field(..., examples=["Order not found with ID: 456"])
    status: int = Field(..., examples=[404])
    timestamp: str = Field(default_factory=_now, examples=["2025-08-07T21:00:00+00:00"])

    @classmethod
    def of(cls, message: str, status: int) -> "ErrorResponse":
        return cls(error=message, status=status)

    @classmethod
    def bad_request(cls, message: str) -> "ErrorResponse":
        return cls.of(message, 400)

    @classmethod
    def internal_server_error(cls, message: str) -> "ErrorResponse":
        return cls.of(message, 500)


def error_response(exc: Exception) -> tuple[int, dict]:
    """Map an exception to ``(status, body)``.

    Service errors keep their own message. Anything else becomes a generic
    500 so no internal detail is exposed.
    """
    if isinstance(exc, ServiceError):
        for error_type, status in STATUS_BY_ERROR.items():
            if isinstance(exc, error_type):
                return status, ErrorResponse.of(exc.message, status).model_dump()
    return 500, ErrorResponse.internal_server_error(UNEXPECTED_ERROR_MESSAGE).model_dump()


def _request_validation_message(exc: RequestValidationError) -> str:
    locations = {error["loc"][0] for error in exc.errors() if error.get("loc")}
    if locations and locations <= {"path", "query"}:
        return INVALID_PARAMETER_MESSAGE
    return INVALID_INPUT_MESSAGE


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError):
        status, body = error_response(exc)
        if status >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        else:
            logger.error(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=status, content=body)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.error(f"Invalid request to {request.method} {request.url.path}: {exc.errors()}")
        body = ErrorResponse.bad_request(_request_validation_message(exc))
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        body = ErrorResponse.of(str(exc.detail), exc.status_code)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        status, body = error_response(exc)
        return JSONResponse(status_code=status, content=body)
