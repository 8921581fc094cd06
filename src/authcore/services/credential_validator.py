"""Stateless credential policy checks."""

import re

# Dot-atom local part and a dotted domain of letter/digit/hyphen labels.
# Quoted local parts, IP literals and display names are not accepted.
_ATEXT = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
EMAIL_PATTERN = re.compile(
    rf"{_ATEXT}+(?:\.{_ATEXT}+)*@{_LABEL}(?:\.{_LABEL})+",
)

MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64


class CredentialValidator:
    """Email syntax and password strength policy.

    Both checks return booleans; raising the matching error is the
    caller's decision.
    """

    MIN_PASSWORD_LENGTH = 8

    def is_email_well_formed(self, email: str) -> bool:
        if not email or len(email) > MAX_EMAIL_LENGTH:
            return False
        if not EMAIL_PATTERN.fullmatch(email):
            return False
        local_part = email.rsplit("@", 1)[0]
        return len(local_part) <= MAX_LOCAL_PART_LENGTH

    def is_password_strong_enough(self, password: str) -> bool:
        return len(password) >= self.MIN_PASSWORD_LENGTH
