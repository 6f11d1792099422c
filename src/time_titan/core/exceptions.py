class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class MissingIdentifierError(ValidationError):
    """Raised when a request omits the employee code it needs."""


class AuthenticationError(DomainError):
    """Raised when an employee code cannot be verified at login."""

    status_code = 401


class NotFoundError(DomainError):
    """Raised when no punch row qualifies (e.g. no punch-in today)."""

    status_code = 404


class UpstreamError(DomainError):
    """Raised when the punch store cannot be queried."""

    status_code = 500
