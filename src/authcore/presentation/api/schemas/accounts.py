"""Account schemas for request/response models.

Email format and password strength are checked by the service so that
they surface with their own error codes; the models only enforce shape.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Request schema for account registration."""

    email: str = Field(..., max_length=254)
    username: str = Field(..., min_length=1, max_length=150)
    first_name: str = Field(default="", max_length=150)
    last_name: str = Field(default="", max_length=150)
    password: str = Field(..., max_length=128)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "username": "jdoe",
                "first_name": "Jane",
                "last_name": "Doe",
                "password": "securepassword123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for login by email or username."""

    email_or_username: str = Field(..., min_length=1)
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email_or_username": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class UpdateAccountRequest(BaseModel):
    """Request schema for credential and profile updates.

    ``current_password`` is always required; omitted fields stay unchanged.
    """

    current_password: str
    email: str | None = Field(default=None, max_length=254)
    username: str | None = Field(default=None, min_length=1, max_length=150)
    password: str | None = Field(default=None, max_length=128)
    first_name: str | None = Field(default=None, max_length=150)
    last_name: str | None = Field(default=None, max_length=150)
    avatar: str | None = Field(default=None, max_length=2048)


class DeleteAccountRequest(BaseModel):
    """Request schema for account deletion."""

    password: str


class ProfileResponse(BaseModel):
    """Public account profile."""

    id: UUID
    email: str
    username: str
    first_name: str
    last_name: str
    avatar: str | None
    date_registered: datetime
    last_seen: datetime

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """Response schema for a successful login."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    expires_in: int = Field(..., description="Seconds until the token expires")
