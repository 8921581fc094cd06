"""Account domain manages identity and credentials only.

This domain handles:
- Account aggregate (id, email, username, display fields)
- Credential (salt + password hash), owned 1:1 by the account
- Repository contract for persistence
"""

from authcore.domain.account.aggregates import (
    Account,
    AccountChanges,
    AccountProfile,
    Credential,
    normalize_email,
)
from authcore.domain.account.repositories import AccountRepository

__all__ = [
    "Account",
    "AccountChanges",
    "AccountProfile",
    "AccountRepository",
    "Credential",
    "normalize_email",
]
