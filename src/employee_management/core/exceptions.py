class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or invalid."""


class ConflictError(DomainError):
    """Raised when a uniqueness or referential rule would be broken."""


class AuthenticationError(DomainError):
    """Raised when credentials are invalid or no session is present."""

    status_code = 401


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""

    status_code = 404


class InternalError(DomainError):
    """Raised for failures the client cannot fix."""

    status_code = 500
