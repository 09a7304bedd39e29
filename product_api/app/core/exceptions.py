"""
Domain-level exceptions.

The product domain has a single business error: a requested product
does not exist.  Everything else (database failures, bad input) is
left to propagate as whatever exception the lower layer raised.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ProductNotFoundError(DomainError):
    """A requested product id does not exist."""

    def __init__(self, message: str = "product not found") -> None:
        super().__init__(message)
