class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an employee (or other entity) does not exist."""


class StorageError(DomainError):
    """Raised when a backing store cannot complete an operation."""
