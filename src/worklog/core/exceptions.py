from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class BadRequestError(DomainError):
    """Raised when the request itself is unusable (e.g. a non-numeric path id)."""


class ValidationError(BadRequestError):
    """Raised when input data does not match the expected schema."""

    def __init__(self, message: str = "Validation failed", details: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.details = details or []


class BusinessRuleError(BadRequestError):
    """Raised when a valid request conflicts with current state (duplicates, locks, active break...)."""


class AuthenticationError(DomainError):
    """Raised when an employee code does not match any employee."""


class NotFoundError(DomainError):
    """Raised when a referenced row does not exist."""
