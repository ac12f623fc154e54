"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database, migrated with the real Alembic revisions
- Table cleanup between integration tests
- The session-scoped TestClient and data seeding helpers

Architecture:
- Unit tests (marked `unit`): mocks only, no database cleanup
- Integration tests: real migrated database, cleaned before every test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL must be set first
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> Path:
    test_db_dir = Path(tempfile.mkdtemp(prefix='storefront_test_'))
    test_db_path = test_db_dir / 'storefront_test.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db_path}'
    os.environ.pop('DATABASE_READ_URL', None)

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    return test_db_path


TEST_DB_PATH = _early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402


# Child tables first
_TABLES_IN_DELETE_ORDER = ('reviews', 'products', 'users')


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    from src.platform.database import migration_runner

    migration_runner.upgrade()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def sync_engine() -> Generator[Engine, None, None]:
    """Blocking engine on the test database, for seeding and assertions."""
    engine = create_engine(f'sqlite:///{TEST_DB_PATH}')
    yield engine
    engine.dispose()


@pytest.fixture(scope='function')
def clean_database(sync_engine: Engine) -> Generator[None, None, None]:
    with sync_engine.begin() as conn:
        for table in _TABLES_IN_DELETE_ORDER:
            conn.execute(text(f'DELETE FROM {table}'))
    yield


@pytest.fixture(scope='function')
async def dispose_engines_after() -> AsyncGenerator[None, None]:
    """Dispose engines created on the test's event loop."""
    yield
    from src.platform.database.orm_db_setting import dispose_engines

    await dispose_engines()


@pytest.fixture
def create_user(sync_engine: Engine) -> Callable[..., dict[str, Any]]:
    """Insert a user row directly; users are owned by another service."""

    def _create_user(name: str, email: str) -> dict[str, Any]:
        with sync_engine.begin() as conn:
            result = conn.execute(
                text('INSERT INTO users (name, email) VALUES (:name, :email)'),
                {'name': name, 'email': email},
            )
            user_id = result.lastrowid
        return {'id': user_id, 'name': name, 'email': email}

    return _create_user


@pytest.fixture
def create_product(sync_engine: Engine) -> Callable[..., int]:
    def _create_product(name: str = 'Walnut Desk Organizer') -> int:
        with sync_engine.begin() as conn:
            result = conn.execute(text('INSERT INTO products (name) VALUES (:name)'), {'name': name})
            return result.lastrowid  # type: ignore[return-value]

    return _create_product


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from src.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
