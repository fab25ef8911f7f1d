"""
Pytest configuration and shared fixtures for all tests.

This file is automatically loaded by pytest and provides:
- Test settings
- A data-access client bound to a fresh in-memory store per test
- A seeded Faker for inline test data
- Guards for process-wide state (root logger, module Faker)

Async tests and fixtures run through pytest-asyncio's auto mode
(asyncio_mode = "auto" in pyproject.toml).
"""

import logging
from typing import AsyncGenerator

import pytest
from faker import Faker

from database import factories
from database.client import DataClient
from shared.config import Settings, get_settings


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def setup_logging():
    """Configure logging for tests."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Reduce noise from third-party loggers
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests, independent of the developer's .env."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        LOG_FORMAT="text",
        SEED_USER_COUNT=10,
    )


@pytest.fixture
def clear_settings_cache():
    """Reset the get_settings() cache around a test that changes env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
async def data_client(test_settings) -> AsyncGenerator[DataClient, None]:
    """Provide a client bound to a fresh store with the schema created."""
    client = DataClient.from_url(test_settings.TEST_DATABASE_URL)
    await client.create_tables()

    yield client

    await client.disconnect()


# =============================================================================
# TEST DATA FIXTURES
# =============================================================================

@pytest.fixture
def fake() -> Faker:
    """Provide a seeded Faker instance for inline test data."""
    instance = Faker()
    instance.seed_instance(12345)
    return instance


@pytest.fixture
def restore_faker_state():
    """Undo any reseeding of the module-level Faker used by the factories."""
    original = factories.fake.random
    state = original.getstate()

    yield factories.fake

    factories.fake.random = original
    original.setstate(state)


# =============================================================================
# PROCESS STATE
# =============================================================================

@pytest.fixture
def restore_root_logger():
    """Put back root handlers and level after code that calls configure_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    yield root

    root.handlers[:] = handlers
    root.setLevel(level)
