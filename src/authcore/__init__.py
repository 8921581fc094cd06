"""authcore - account registration and authentication.

Exports the building blocks most callers need; the HTTP API lives in
``authcore.presentation.api`` and configuration in ``authcore_config``.
"""

from authcore.application.services import AuthenticationService
from authcore.domain.account import (
    Account,
    AccountChanges,
    AccountProfile,
    AccountRepository,
    Credential,
)
from authcore.exceptions import (
    AccountNotFoundError,
    AuthError,
    DuplicateEmailError,
    DuplicateUsernameError,
    ErrorCode,
    ForbiddenError,
    InvalidEmailFormatError,
    InvalidTokenError,
    NotFoundError,
    NotRegisteredError,
    StoreUnavailableError,
    UnauthorizedError,
    WeakPasswordError,
    WrongCredentialsError,
)
from authcore.schemas import AccessToken, TokenPayload
from authcore.services import (
    CredentialValidator,
    HashParameters,
    JWTService,
    PasswordHashingService,
    SaltGenerator,
    TokenConfig,
)

__all__ = [
    "AccessToken",
    "Account",
    "AccountChanges",
    "AccountNotFoundError",
    "AccountProfile",
    "AccountRepository",
    "AuthError",
    "AuthenticationService",
    "Credential",
    "CredentialValidator",
    "DuplicateEmailError",
    "DuplicateUsernameError",
    "ErrorCode",
    "ForbiddenError",
    "HashParameters",
    "InvalidEmailFormatError",
    "InvalidTokenError",
    "JWTService",
    "NotFoundError",
    "NotRegisteredError",
    "PasswordHashingService",
    "SaltGenerator",
    "StoreUnavailableError",
    "TokenConfig",
    "TokenPayload",
    "UnauthorizedError",
    "WeakPasswordError",
    "WrongCredentialsError",
]
