class DomainError(Exception):
    """Base exception for business rule violations.

    The message is safe to show to the user as-is.
    """

    default_message = "Request could not be completed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    default_message = "You do not have permission"


class AuthenticationError(DomainError):
    """Raised when login credentials are rejected."""

    default_message = "Login failed"


class AccountNotFoundError(AuthenticationError):
    """No account matches the email. Never says which table was checked."""

    default_message = "Account not found."


class InvalidCredentialError(AuthenticationError):
    """Account exists but the password does not match."""

    default_message = "Invalid email or password."


class InactiveAccountError(AuthenticationError):
    """Password is correct but the account is not active."""

    default_message = "Account is inactive."


class AccountConflictError(DomainError):
    """The email is already in use by the other portal, or the employee is already registered."""

    default_message = "An account with this email already exists. Please use a different email or portal."


class StorageError(DomainError):
    """The backing database call failed."""

    default_message = "Service temporarily unavailable. Please try again."
