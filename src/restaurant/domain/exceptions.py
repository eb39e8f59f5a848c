"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input at a construction or issuance boundary."""


class EntityNotFoundError(ValidationError):
    """A requested entity does not exist."""


class InvalidStateError(DomainException):
    """A well-formed request violates a business precondition."""
