"""
Pytest configuration for authcore integration tests.

Integration tests run against a throwaway SQLite file per test.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    session_maker,
)

__all__ = [
    "async_engine",
    "db_session",
    "session_maker",
]
