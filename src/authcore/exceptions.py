"""Identity and authentication exceptions.

Every expected failure of an account operation is an ``AuthError`` carrying
a stable ``ErrorCode``. The request layer maps codes to HTTP statuses (see
``authcore.presentation.api.exception_handlers``); nothing here knows about
HTTP.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Conflict (409)
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    NOT_REGISTERED = "NOT_REGISTERED"

    # Validation (422)
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Credentials (400 / 401 / 403)
    WRONG_CREDENTIALS = "WRONG_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    FORBIDDEN = "FORBIDDEN"

    # Not found (404)
    NOT_FOUND = "NOT_FOUND"

    # Transient (503)
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class AuthError(Exception):
    """Base exception for all authentication errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r})"
        )


class DuplicateEmailError(AuthError):
    """Email already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            f"Email {email} already registered",
            ErrorCode.DUPLICATE_EMAIL,
        )


class DuplicateUsernameError(AuthError):
    """Username already registered."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(
            f"Username {username} already registered",
            ErrorCode.DUPLICATE_USERNAME,
        )


class InvalidEmailFormatError(AuthError):
    """Raised when an email address is not syntactically valid."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            f"Email {email} is not a proper email address",
            ErrorCode.INVALID_EMAIL_FORMAT,
        )


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet the requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class WrongCredentialsError(AuthError):
    """Raised when a password does not match the stored credential."""

    def __init__(self, message: str = "Wrong credentials"):
        super().__init__(message, ErrorCode.WRONG_CREDENTIALS)


class NotRegisteredError(AuthError):
    """Raised at login when no account matches the email or username."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"{identifier} is not registered",
            ErrorCode.NOT_REGISTERED,
        )


class NotFoundError(AuthError):
    """Raised when a requested account does not exist."""

    def __init__(self, message: str = "Account not found"):
        super().__init__(message, ErrorCode.NOT_FOUND)


class AccountNotFoundError(NotFoundError):
    """Account not found by id."""

    def __init__(self, account_id: Any):
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")


class UnauthorizedError(AuthError):
    """Raised when the caller's identity no longer resolves to an account."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, ErrorCode.UNAUTHORIZED)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_TOKEN)


class ForbiddenError(AuthError):
    """Raised when a destructive operation is refused for wrong credentials."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, ErrorCode.FORBIDDEN)


class StoreUnavailableError(AuthError):
    """Raised when the account store cannot be reached.

    This is a transient failure and is never reported as a credential error.
    """

    def __init__(self, message: str = "Account store is unavailable"):
        super().__init__(message, ErrorCode.STORE_UNAVAILABLE)
