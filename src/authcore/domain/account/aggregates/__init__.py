from authcore.domain.account.aggregates.account import (
    Account,
    AccountChanges,
    AccountProfile,
    Credential,
    normalize_email,
)

__all__ = [
    "Account",
    "AccountChanges",
    "AccountProfile",
    "Credential",
    "normalize_email",
]
