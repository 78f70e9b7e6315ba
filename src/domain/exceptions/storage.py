"""Data store domain exceptions."""

from .base import DomainException


class DataAccessException(DomainException):
    """Raised when the contract store fails to read or write."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            message=f"Data access failed during {operation}: {message}",
            code="DATA_ACCESS_ERROR",
        )
        self.operation = operation
