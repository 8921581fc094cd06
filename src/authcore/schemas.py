"""Identity schemas and data structures.

These are simple data classes used for transferring token data between
components.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AccessToken:
    """A freshly issued bearer token.

    Attributes
    ----------
    token
        The encoded JWT
    expires_at
        Absolute expiry (timezone-aware UTC)
    token_type
        Always "bearer"
    """

    token: str = field(repr=False)
    expires_at: datetime
    token_type: str = "bearer"

    def expires_in(self, now: datetime) -> int:
        """Seconds until expiry, relative to ``now``."""
        return max(0, int((self.expires_at - now).total_seconds()))


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    account_id
        The identifier carried in the ``sub`` claim
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    account_id: UUID
    issued_at: datetime
    expires_at: datetime
