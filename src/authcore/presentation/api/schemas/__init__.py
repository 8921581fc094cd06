from authcore.presentation.api.schemas.accounts import (
    DeleteAccountRequest,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    TokenResponse,
    UpdateAccountRequest,
)

__all__ = [
    "DeleteAccountRequest",
    "LoginRequest",
    "ProfileResponse",
    "RegisterRequest",
    "TokenResponse",
    "UpdateAccountRequest",
]
