"""Per-account salt generation."""

import secrets
import string


class SaltGenerator:
    """Generates fresh alphanumeric salts from the OS CSPRNG.

    Sixteen characters over a 62-symbol alphabet give ~95 bits of entropy,
    so collisions between accounts are negligible.
    """

    ALPHABET = string.ascii_letters + string.digits
    LENGTH = 16

    def __init__(self, length: int = LENGTH):
        if length < 8:  # noqa: PLR2004 - Argon2 minimum salt size
            msg = "Salt length must be at least 8 characters"
            raise ValueError(msg)
        self._length = length

    def generate(self) -> str:
        return "".join(secrets.choice(self.ALPHABET) for _ in range(self._length))
