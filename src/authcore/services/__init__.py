"""Identity services - salts, password hashing, policy checks and JWT."""

from authcore.services.credential_validator import CredentialValidator
from authcore.services.jwt_service import JWTService, TokenConfig
from authcore.services.password_service import HashParameters, PasswordHashingService
from authcore.services.salt_service import SaltGenerator

__all__ = [
    "CredentialValidator",
    "HashParameters",
    "JWTService",
    "PasswordHashingService",
    "SaltGenerator",
    "TokenConfig",
]
