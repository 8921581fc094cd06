"""JWT token service.

Issues and verifies the stateless bearer tokens handed out at login.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from authcore.exceptions import InvalidTokenError
from authcore.schemas import AccessToken, TokenPayload


@dataclass(frozen=True)
class TokenConfig:
    """Immutable signing configuration, built once at startup.

    Attributes
    ----------
    secret_key
        Symmetric HS256 key
    issuer
        Value of both the ``iss`` and ``aud`` claims
    lifetime_days
        Days until an issued token expires
    """

    secret_key: str = field(repr=False)
    issuer: str = "authcore"
    lifetime_days: int = 7

    def __post_init__(self) -> None:
        if not self.secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if self.lifetime_days < 1:
            msg = "Token lifetime must be at least one day"
            raise ValueError(msg)

    @property
    def lifetime(self) -> timedelta:
        return timedelta(days=self.lifetime_days)


class JWTService:
    """Service for JWT token creation and verification.

    The payload carries the account identifier as ``sub`` plus the standard
    ``iat``/``exp``/``iss``/``aud`` claims. There is no refresh and no
    revocation: a token stays valid until ``exp``.

    Examples
    --------
    >>> service = JWTService(TokenConfig(secret_key="your-secret-key"))
    >>> token = service.issue(account_id)
    >>> payload = service.verify(token.token)
    >>> print(payload.account_id)
    """

    ALGORITHM = "HS256"

    def __init__(self, config: TokenConfig):
        self._config = config

    def issue(self, account_id: UUID, now: datetime | None = None) -> AccessToken:
        """Create a signed token for an account.

        Parameters
        ----------
        account_id
            The account's unique identifier
        now
            Issue time (defaults to the current UTC time)

        Returns
        -------
        The encoded token together with its absolute expiry
        """
        issued_at = now or datetime.now(tz=timezone.utc)
        expires_at = issued_at + self._config.lifetime

        payload = {
            "sub": str(account_id),
            "iat": issued_at,
            "exp": expires_at,
            "iss": self._config.issuer,
            "aud": self._config.issuer,
        }
        token = jwt.encode(
            payload,
            self._config.secret_key,
            algorithm=self.ALGORITHM,
        )
        return AccessToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenPayload:
        """Verify and decode a token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._config.issuer,
                issuer=self._config.issuer,
                options={"require": ["sub", "exp", "iat"]},
            )

            return TokenPayload(
                account_id=UUID(payload["sub"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
