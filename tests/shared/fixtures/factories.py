"""Factories for accounts and cheap hashing services used across tests."""

from authcore.domain.account import Account, Credential
from authcore.services import HashParameters, PasswordHashingService

TEST_EMAIL = "test@example.com"
TEST_USERNAME = "tester"
TEST_PASSWORD = "correct-horse-battery"  # noqa: S105
TEST_SALT = "abcdEFGH12345678"

# Minimum Argon2 cost keeps the suite fast; format and algorithm are unchanged
FAST_HASH_PARAMETERS = HashParameters(
    memory_cost_kib=64,
    time_cost=1,
    hash_length=60,
    parallelism=1,
)


def fast_password_service() -> PasswordHashingService:
    return PasswordHashingService(FAST_HASH_PARAMETERS)


def make_account(
    email: str = TEST_EMAIL,
    username: str = TEST_USERNAME,
    password: str = TEST_PASSWORD,
    salt: str = TEST_SALT,
    **kwargs,
) -> Account:
    """Create an account whose credential matches ``password``."""
    password_hash = fast_password_service().hash(password, salt)
    return Account.create(
        email=email,
        username=username,
        first_name=kwargs.get("first_name", "Test"),
        last_name=kwargs.get("last_name", "User"),
        credential=Credential(salt=salt, password_hash=password_hash),
    )
