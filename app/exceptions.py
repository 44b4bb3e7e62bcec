# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
#
# Every error response has the same shape:
#   {"detail": "...", "code": "...", "suggestion": "...", "details": {...}}
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings
from lib.supabase_client import NO_ROWS_CODE, SupabaseClientError

logger = logging.getLogger(__name__)


class PortfolioException(Exception):
    """
    Base exception for the Portfolio API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PORTFOLIO_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Resource Exceptions
# =============================================================================

class NotFoundError(PortfolioException):
    """Raised when a row (or setting key) doesn't exist."""

    def __init__(self, resource: str, identifier: str | None = None):
        message = f"{resource} not found" + (f": {identifier}" if identifier else "")
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {resource.lower()} id is correct",
            details={"resource": resource, "id": identifier} if identifier else {},
        )


class BadRequestError(PortfolioException):
    """Raised when a request is well-formed but cannot be applied."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=400,
            suggestion=suggestion,
        )


class AdminNotConfiguredError(PortfolioException):
    """Raised when production login is attempted without admin credentials."""

    def __init__(self):
        super().__init__(
            message="Admin credentials are not configured",
            code="ADMIN_NOT_CONFIGURED",
            status_code=500,
            suggestion="Set ADMIN_USERNAME and ADMIN_PASSWORD in the environment",
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidFileTypeError(PortfolioException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, content_type: str | None, allowed: str):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only {allowed} files are allowed",
            details={"filename": filename, "content_type": content_type, "allowed": allowed}
        )


class FileTooLargeError(PortfolioException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": round(size_mb, 2), "max_mb": max_mb}
        )


class EmptyFileError(PortfolioException):
    """Raised when an upload has no content."""

    def __init__(self, field: str):
        super().__init__(
            message=f"No {field} file provided",
            code="EMPTY_FILE",
            status_code=400,
            suggestion=f"Send the file as multipart form field '{field}'",
        )


class StorageUploadError(PortfolioException):
    """Raised when file upload to storage fails."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to upload file to storage: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            suggestion="Check STORAGE_BUCKET exists and the service key can write to it",
            details={"error": error}
        )


class StorageDeleteError(PortfolioException):
    """Raised when a storage object cannot be removed."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Failed to delete file from storage: {error}",
            code="STORAGE_DELETE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"path": path, "error": error}
        )


# =============================================================================
# Database Error Mapping
# =============================================================================

# PostgREST / Postgres code -> (HTTP status, API code, message)
DATABASE_ERROR_MAP: dict[str, tuple[int, str, str]] = {
    NO_ROWS_CODE: (404, "NOT_FOUND", "Resource not found"),
    "23505": (409, "CONFLICT", "Resource already exists"),
    "23503": (400, "INVALID_REFERENCE", "Referenced resource does not exist"),
    "23514": (400, "CONSTRAINT_VIOLATION", "Value violates a database constraint"),
    "23502": (400, "CONSTRAINT_VIOLATION", "A required field is missing"),
    "22P02": (400, "INVALID_INPUT", "Invalid input syntax"),
}


def database_error_response(exc: SupabaseClientError) -> tuple[int, dict[str, Any]]:
    """
    Map a SupabaseClientError to (status_code, body).

    Unknown codes become 500 DATABASE_ERROR; the underlying message is only
    exposed outside production.
    """
    if exc.code in DATABASE_ERROR_MAP:
        status_code, code, message = DATABASE_ERROR_MAP[exc.code]
        return status_code, {"detail": message, "code": code}

    body: dict[str, Any] = {
        "detail": "Database operation failed",
        "code": "DATABASE_ERROR",
    }
    if not settings.is_production:
        body["details"] = {"error": exc.message, "db_code": exc.code}
    return 500, body


# =============================================================================
# Exception Handlers
# =============================================================================

async def portfolio_exception_handler(
    request: Request,
    exc: PortfolioException
) -> JSONResponse:
    """
    Convert PortfolioException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def supabase_exception_handler(
    request: Request,
    exc: SupabaseClientError
) -> JSONResponse:
    """Convert database errors to HTTP statuses by PostgREST/Postgres code."""
    status_code, body = database_error_response(exc)
    if status_code >= 500:
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    else:
        logger.warning(f"Database rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content=body)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Validation failures are reported as 400 with the per-field error list.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        })
    )
