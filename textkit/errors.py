"""Structured error handling."""
from typing import Any, Dict, List, Optional
import uuid

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class TextkitError(Exception):
    """Base error for textkit."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(TextkitError, ValueError):
    """An argument is outside the domain a utility accepts."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="invalid_argument",
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class RequestValidationFailed(TextkitError):
    """Request data was rejected by a schema validator."""

    def __init__(self, location: str, errors: List[Dict[str, Any]]):
        super().__init__(
            code="validation_failed",
            message=f"Request {location} failed validation",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"location": location, "errors": errors},
        )


class ValidatorCrashedError(TextkitError):
    """A schema validator raised instead of returning a result."""

    def __init__(self, location: str):
        super().__init__(
            code="validation_internal_error",
            message="Internal validation error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={
                "location": location,
                "errors": [{"message": "Internal validation error"}],
            },
        )


async def textkit_error_handler(request: Request, exc: TextkitError) -> JSONResponse:
    """Handle TextkitError exceptions."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "request_id": request_id,
            "success": False,
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details,
            },
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "request_id": request_id,
            "success": False,
            "error": {
                "code": "internal_error",
                "message": "An unexpected error occurred",
                "details": {"type": type(exc).__name__},
            },
        },
    )


# FastAPI names path parameters "path"; the validation dependencies call them "params"
_LOCATIONS = {"body": "body", "query": "query", "path": "params"}


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI's own request validation errors as validation_failed."""
    issues = []
    location = "body"
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATIONS:
            if not issues:
                location = _LOCATIONS[loc[0]]
            loc = loc[1:]
        issues.append({"message": err.get("msg", ""), "field": loc or None, "type": err.get("type")})
    return await textkit_error_handler(request, RequestValidationFailed(location, issues))
