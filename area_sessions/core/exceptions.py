"""
Exception hierarchy for the area session service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: area_sessions.models (StorageError value)
System role: Centralized exception handling across the application
"""

from typing import Any

from area_sessions.models.storage_error import StorageError, StorageErrorCode


class AreaSessionsException(Exception):
    """Base exception for all area session service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(AreaSessionsException):
    """Raised when a caller violates an operation's input contract."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class StorageOperationError(AreaSessionsException):
    """
    Raised by the session store when an operation fails.

    Carries the classified StorageError value; the native cause, if any,
    is chained as __cause__.
    """

    def __init__(
        self,
        error: StorageError,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage operation error.

        Args:
            error: Classified storage error
            details: Additional context (operation, session_id)
        """
        details = details or {}
        details["code"] = error.code.value
        details["retry"] = error.retry
        self.error = error
        super().__init__(error.message, details)

    @property
    def code(self) -> StorageErrorCode:
        return self.error.code

    @property
    def retry(self) -> bool:
        return self.error.retry
