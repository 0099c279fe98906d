"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource_id: Any, message: str = "Record not found"):
        super().__init__(
            message,
            error_code="NOT_FOUND",
            details={"id": resource_id},
        )


class ConflictError(AppException):
    """Raised when a record with the same id already exists."""

    status_code = 400

    def __init__(self, resource_id: Any, message: str = "Record already exists"):
        super().__init__(
            message,
            error_code="CONFLICT",
            details={"id": resource_id},
        )


class InvalidPayloadError(AppException):
    """Request body could not be decoded into a record."""

    status_code = 400

    def __init__(self, message: str = "Invalid JSON format", reason: Optional[str] = None):
        super().__init__(
            message,
            error_code="INVALID_PAYLOAD",
            details={"reason": reason} if reason else {},
        )
