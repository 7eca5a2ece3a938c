"""
Custom exceptions for consistent error reporting.

Every failure the parcel store surfaces is an AppException carrying a
standardized error code.
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ParcelNotFoundError(AppException):
    """Raised when no parcel row matches the requested number."""

    def __init__(self, number: int):
        super().__init__(
            message=f"Parcel with number {number} not found",
            error_code="ERR_NOT_FOUND_001",
            details={"resource": "parcel", "id": number}
        )


class StorageError(AppException):
    """Raised when the underlying database fails (connection, constraint, schema)."""

    def __init__(self, operation: str, cause: Exception):
        super().__init__(
            message=f"Storage failure during {operation}: {cause}",
            error_code="ERR_STORAGE_001",
            details={"operation": operation, "cause": type(cause).__name__}
        )
