"""Custom exception classes for the finance tracker.

Each exception maps to an error code defined in errors.py and carries the
HTTP status the API layer should answer with.
"""

from typing import Any


class FinanceTrackerError(Exception):
    """Base exception for all application errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "VAL_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 500)
    """

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int = 500,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status
        super().__init__(error_code)


class ValidationError(FinanceTrackerError):
    """Raised when input is malformed or out of range.

    Always identifies the offending field. Never retried.
    """

    def __init__(self, field: str, message: str, details: dict[str, Any] | None = None):
        self.field = field
        self.message = message
        super().__init__("VAL_001", details=details, http_status=400)


class Unauthenticated(FinanceTrackerError):
    """Raised when a protected procedure is called without a resolved user."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("AUTH_001", details=details, http_status=401)


class StorageUnavailable(FinanceTrackerError):
    """Raised when a write is attempted without a usable store connection.

    Reads never raise this; they degrade to empty results instead.
    """

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("DB_003", details=details, http_status=503)
