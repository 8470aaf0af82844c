"""
Error handling middleware for API

FastAPI calls these handlers when an exception escapes a route:
- Validation errors (bad request format)
- Domain errors (session not found, bad numbers, ...)
- Anything else (500)
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import uuid
from typing import Optional

from api.schemas.error import ErrorResponse, ErrorDetail, ValidationErrorResponse
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.API)


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
        status_code: int = 400
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)


class SessionNotFoundError(DomainError):
    """Session ID doesn't exist"""
    def __init__(self, session_id: str):
        super().__init__(
            code="SESSION_NOT_FOUND",
            message=f"Session '{session_id}' not found",
            details={"session_id": session_id},
            status_code=404
        )


class InvalidNumbersError(DomainError):
    """Input array missing or too long"""
    def __init__(self, message: str, max_length: Optional[int] = None):
        super().__init__(
            code="INVALID_NUMBERS",
            message=message,
            details={"max_length": max_length} if max_length is not None else {},
            status_code=422
        )


class InvalidSpeedError(DomainError):
    def __init__(self, speed_ms: int, min_ms: int, max_ms: int):
        super().__init__(
            code="INVALID_SPEED",
            message=f"Speed {speed_ms}ms is outside {min_ms}-{max_ms}ms",
            details={"speed_ms": speed_ms, "min": min_ms, "max": max_ms},
            status_code=422
        )


class PlaybackActionError(DomainError):
    """Unknown playback action"""
    def __init__(self, action: str, valid_actions: list):
        super().__init__(
            code="INVALID_PLAYBACK_ACTION",
            message=f"Playback action '{action}' is not supported",
            details={"action": action, "valid_actions": valid_actions},
            status_code=400
        )


def _json(response) -> dict:
    return response.model_dump(mode="json")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors (bad JSON structure)"""
        request_id = str(uuid.uuid4())
        errors = exc.errors()

        log.warn(f"Validation error ({request_id}): {len(errors)} errors", path=request.url.path)

        validation_errors = []
        for error in errors:
            field = ".".join(str(x) for x in error["loc"][1:])  # Skip "body"
            validation_errors.append({
                "field": field,
                "message": error["msg"],
                "type": error["type"]
            })

        response = ValidationErrorResponse(
            error=ErrorDetail(
                code="VALIDATION_ERROR",
                message="Request validation failed",
                details={"error_count": len(errors)},
            ),
            validation_errors=validation_errors,
            request_id=request_id
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_json(response)
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        """Handle domain-specific business logic errors"""
        request_id = str(uuid.uuid4())

        log.warn(f"Domain error ({request_id}): {exc.code} - {exc.message}")

        response = ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
            ),
            request_id=request_id
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=_json(response)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors"""
        request_id = str(uuid.uuid4())

        log.error(
            f"Unexpected error ({request_id}): {type(exc).__name__}: {str(exc)}",
            path=request.url.path
        )

        response = ErrorResponse(
            error=ErrorDetail(
                code="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred. Please try again.",
                details={"request_id": request_id},
            ),
            request_id=request_id
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_json(response)
        )
