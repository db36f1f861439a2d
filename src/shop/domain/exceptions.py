"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Storage failures are not part of this hierarchy.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UserNotFoundError(EntityNotFoundError):
    """A user identity cannot be resolved to a persisted record."""


class ItemNotFoundError(EntityNotFoundError):
    """A product is not present in the cart (strict removal only)."""


class CartEmptyError(DomainException):
    """Order creation was attempted against a cart with no items."""


class InvalidOrderOperationError(DomainException):
    """A status-gated operation was attempted from a forbidding status."""


class OrderKeyUnavailableError(DomainException):
    """No unused order key could be generated for a new order."""
