"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """The order quantity is not a positive whole number."""

    def __init__(self, message: str = "Invalid quantity") -> None:
        super().__init__(message)


class InsufficientStockError(ValidationError):
    """More units were requested than are in stock."""

    def __init__(self, available: int) -> None:
        super().__init__(f"Insufficient stock. Available: {available}")
        self.available = available


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
