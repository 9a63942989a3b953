"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every operation that raises one of these leaves state unchanged.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or malformed."""


class OutOfRangeError(DomainException):
    """A cart position is outside the current bounds."""


class EmptyCartError(DomainException):
    """Checkout was attempted with no items in the cart."""
