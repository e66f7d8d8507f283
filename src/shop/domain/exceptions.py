"""Domain-level exceptions.

Every rule violation raised by the store is a subclass of DomainException,
so callers (the CLI, or any other front end) can catch them uniformly.
None of these are fatal: the store is left unchanged when one is raised.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateEntityError(ValidationError):
    """An entity with the same key already exists."""


class InsufficientStockError(ValidationError):
    """More units were requested than the product has in stock."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} available)"
        )
        self.product_name = product_name
        self.requested = requested
        self.available = available


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_name: str) -> None:
        super().__init__(f"Product not found: '{product_name}'")
        self.product_name = product_name


class CustomerNotFoundError(EntityNotFoundError):

    def __init__(self, email: str) -> None:
        super().__init__(f"Customer not found: '{email}'")
        self.email = email
