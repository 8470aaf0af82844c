"""
Error schemas - Pydantic models for error responses
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""
    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional context (field names, valid values, etc.)"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the error occurred"
    )


class ErrorResponse(BaseModel):
    """API error response - standardized format

    All API errors use this structure so the chat panel can show them uniformly.
    """
    error: ErrorDetail = Field(description="Error information")
    request_id: Optional[str] = Field(None, description="Request ID for logging/debugging")

    class Config:
        json_schema_extra = {
            "example": {
                "error": {
                    "code": "SESSION_NOT_FOUND",
                    "message": "Session '3f2a' not found",
                    "details": {"session_id": "3f2a"},
                    "timestamp": "2025-11-26T10:30:00Z"
                },
                "request_id": "req-12345"
            }
        }


class ValidationErrorResponse(BaseModel):
    """Validation error - when request body is invalid"""
    error: ErrorDetail = Field(description="Error information")
    validation_errors: list[Dict[str, Any]] = Field(
        description="Per-field validation errors"
    )
    request_id: Optional[str] = Field(None, description="Request ID for logging/debugging")
