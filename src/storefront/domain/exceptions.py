"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is not owned by the caller)."""


class ConflictError(DomainException):
    """The store rejected a write as a uniqueness or reference violation."""


class TransactionFailure(DomainException):
    """The store failed to run, commit or roll back a transaction."""


class EmptyCartError(ValidationError):
    """Checkout was attempted with no cart lines."""


class InvalidAddressError(ValidationError):
    """Checkout named an address that does not belong to the user."""


class InsufficientStockError(ValidationError):
    """An inventory cell cannot cover the requested quantity.

    Carries the variant and the quantity currently available so the
    caller can tell the customer which line failed and what is left.
    """

    def __init__(
        self,
        product_id: int,
        color_id: int,
        size_id: int,
        available: int,
        requested: int,
    ) -> None:
        self.product_id = product_id
        self.color_id = color_id
        self.size_id = size_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient inventory for product {product_id} "
            f"(color {color_id}, size {size_id}): "
            f"need {requested}, have {available} available"
        )
