"""Password hashing service using Argon2.

Hashes are computed from an explicit per-account salt so that the same
(password, salt) pair always yields the same digest. The Argon2 parameters
are embedded in the encoded digest, which keeps verification independent of
the currently configured parameters.
"""

from __future__ import annotations

import hmac
import logging
import os
from dataclasses import dataclass

from argon2 import Type, extract_parameters
from argon2.exceptions import HashingError, InvalidHashError
from argon2.low_level import hash_secret

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HashParameters:
    """Argon2 cost parameters.

    Attributes
    ----------
    memory_cost_kib
        Memory per hash in KiB (32768 = 32 MiB)
    time_cost
        Number of passes over memory
    hash_length
        Raw digest length in bytes
    parallelism
        Lanes/threads used per hash
    """

    memory_cost_kib: int = 32768
    time_cost: int = 3
    hash_length: int = 60
    parallelism: int = 1

    @classmethod
    def for_host(
        cls,
        memory_cost_kib: int = 32768,
        time_cost: int = 3,
        hash_length: int = 60,
        max_parallelism: int = 4,
    ) -> HashParameters:
        """Tie parallelism to the CPU count, capped at ``max_parallelism``.

        The cap keeps concurrent logins from oversubscribing the host.
        """
        cpus = os.cpu_count() or 1
        parallelism = max(1, min(cpus, max_parallelism))
        return cls(
            # Argon2 needs at least 8 KiB per lane
            memory_cost_kib=max(memory_cost_kib, 8 * parallelism),
            time_cost=time_cost,
            hash_length=hash_length,
            parallelism=parallelism,
        )


class PasswordHashingService:
    """Service for deterministic password hashing and verification.

    Uses Argon2i (data-independent addressing, version 0x13). The service
    holds no mutable state and is safe to call from several worker threads
    at once.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> digest = service.hash("my_secure_password", "abcdEFGH12345678")
    >>> service.verify("my_secure_password", "abcdEFGH12345678", digest)
    True
    >>> service.verify("wrong_password", "abcdEFGH12345678", digest)
    False
    """

    TYPE = Type.I
    VERSION = 19

    def __init__(self, parameters: HashParameters | None = None):
        """Initialize the password hashing service.

        Parameters
        ----------
        parameters
            Argon2 cost parameters. Defaults to 32 MiB, 3 passes, a
            60 byte digest and a single lane.
        """
        self._parameters = parameters or HashParameters()

    @property
    def parameters(self) -> HashParameters:
        return self._parameters

    def hash(self, password: str, salt: str) -> str:
        """Hash a plaintext password with the given salt.

        Parameters
        ----------
        password
            The plaintext password to hash
        salt
            The account's salt (see ``SaltGenerator``)

        Returns
        -------
        The PHC-encoded Argon2 string, e.g.
        ``$argon2i$v=19$m=32768,t=3,p=4$<salt>$<digest>``
        """
        params = self._parameters
        encoded = hash_secret(
            password.encode("utf-8"),
            salt.encode("utf-8"),
            time_cost=params.time_cost,
            memory_cost=params.memory_cost_kib,
            parallelism=params.parallelism,
            hash_len=params.hash_length,
            type=self.TYPE,
            version=self.VERSION,
        )
        return encoded.decode("ascii")

    def verify(self, password: str, salt: str, expected_hash: str) -> bool:
        """Verify a password by re-hashing it with the stored parameters.

        The parameters are read from ``expected_hash`` itself, so a change
        of configured cost never invalidates existing digests.

        Parameters
        ----------
        password
            The plaintext password to check
        salt
            The account's salt
        expected_hash
            The stored encoded digest

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            stored = extract_parameters(expected_hash)
        except InvalidHashError:
            logger.warning("Stored password hash has an unrecognized format")
            return False

        try:
            computed = hash_secret(
                password.encode("utf-8"),
                salt.encode("utf-8"),
                time_cost=stored.time_cost,
                memory_cost=stored.memory_cost,
                parallelism=stored.parallelism,
                hash_len=stored.hash_len,
                type=stored.type,
                version=stored.version,
            )
        except HashingError:
            # Salt shorter than Argon2's minimum
            return False

        return hmac.compare_digest(computed, expected_hash.encode("ascii"))
