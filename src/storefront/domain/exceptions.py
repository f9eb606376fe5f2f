"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """A read or write against the backing store did not complete."""


class ParseError(DomainException):
    """Cached content could not be decoded."""


class IllegalTransitionError(ValidationError):
    """An order status change is not allowed by the active policy."""


class AuthenticationError(DomainException):
    """The operation requires a signed-in operator."""
