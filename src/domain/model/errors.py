"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist or is not owned by the caller."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class PermissionDeniedError(DomainError):
    """Caller lacks permission for the requested action."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class AuthenticationError(DomainError):
    """Session credential is missing, malformed, forged or expired."""


class InvalidResetTokenError(DomainError):
    """Reset token is unknown, already used, or past its expiry window."""

    def __init__(self, message: str = "Invalid or expired reset token"):
        super().__init__(message)


class RepositoryError(DomainError):
    """Backing store failed while serving a request."""


class MailDeliveryError(DomainError):
    """Mail transport refused or failed to deliver a message."""
