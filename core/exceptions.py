"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Meal').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} not found."
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
