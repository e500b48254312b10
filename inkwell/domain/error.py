"""Domain layer errors.

Every error carries an ``ErrorKind`` tag. The interface layer maps the tag to a
transport status, so domain code never deals with HTTP codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a domain failure."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or missing input."""

    kind = ErrorKind.VALIDATION


class AuthenticationError(DomainError):
    """Missing, invalid or expired credential."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"Not authorized to modify this {resource}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Uniqueness violation."""

    kind = ErrorKind.CONFLICT


class InternalError(DomainError):
    """Unexpected failure, e.g. the store is unavailable."""

    kind = ErrorKind.INTERNAL
