"""Root pytest configuration.

Test Structure:
    tests/
    ├── authcore/
    │   ├── unit/              # Fast, isolated tests (mocked repositories)
    │   └── integration/       # SQLite-backed persistence, API and CLI tests
    ├── authcore_config/       # Settings loading
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_SLOW=1           Run @pytest.mark.slow tests

Pytest Options:
    --run-slow           Run slow tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from authcore_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

# Settings refuse to load without a signing key
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that use a real database, HTTP stack or CLI",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that hash with production Argon2 cost (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip slow tests unless explicitly enabled."""
    run_slow = config.getoption("--run-slow") or os.environ.get(
        "RUN_SLOW",
        "",
    ).lower() in ("1", "true", "yes")

    if run_slow:
        return

    skip_slow = pytest.mark.skip(
        reason="Slow test - run with --run-slow or RUN_SLOW=1",
    )
    for item in items:
        if "slow" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Drop cached settings around every test so env changes take effect."""
    clear_settings_cache()
    yield
    clear_settings_cache()
