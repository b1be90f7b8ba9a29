"""
Base exception classes for the food ordering backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class FoodOrderError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Error body for API responses.

        `details` is for logs; ErrorResponse leaves it out of the body.
        """
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class NotFoundError(FoodOrderError):
    """Resource not found."""

    pass


class ValidationError(FoodOrderError):
    """Input validation failed."""

    pass


class AuthenticationError(FoodOrderError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(FoodOrderError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(FoodOrderError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(ExternalServiceError):
    """The document store rejected or failed an operation."""

    def __init__(
        self,
        message: str,
        operation: str,
        table: str,
    ):
        super().__init__(
            message,
            service="document_store",
            code="STORE_ERROR",
            details={"operation": operation, "table": table},
        )
        self.operation = operation
        self.table = table


class DocumentNotFoundError(NotFoundError):
    """Raised when an update targets a document that does not exist."""

    def __init__(self, table: str, document_id: str):
        super().__init__(
            f"Document not found in {table}: {document_id}",
            code="DOCUMENT_NOT_FOUND",
            details={"table": table, "document_id": document_id},
        )


class PrivilegedOperationError(AuthorizationError):
    """Raised when a restricted repository is asked for an administrative operation."""

    def __init__(self, table: str, operation: str):
        super().__init__(
            f"Operation '{operation}' on {table} requires privileged access",
            code="PRIVILEGED_OPERATION",
            details={"table": table, "operation": operation},
        )
