"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database per session (or TEST_DATABASE_URL for PostgreSQL)
- Table cleanup before every non-unit test
- Test fixtures for customers, admins and events

Architecture:
- Unit tests (test/**/unit/): Override fixtures with no-ops in their own conftest.py
- Integration tests: Use a real database with cleanup between tests
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL must be in place first
# =============================================================================
import os
from pathlib import Path
import tempfile

from dotenv import load_dotenv


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    env_file = '.env' if Path('.env').exists() else '.env.example'
    load_dotenv(env_file)

    test_database_url = os.environ.get('TEST_DATABASE_URL')
    if test_database_url:
        os.environ['DATABASE_URL'] = test_database_url
    else:
        worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
        db_dir = Path(tempfile.mkdtemp(prefix='ticketing_test_'))
        os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_dir / f"test_{worker_id}.db"}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.constant.path import ALEMBIC_INI  # noqa: E402
from test.shared.utils import auth_headers, create_event, create_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_NAME,
    ANOTHER_CUSTOMER_EMAIL,
    ANOTHER_CUSTOMER_NAME,
    CUSTOMER_EMAIL,
    CUSTOMER_NAME,
    DEFAULT_PASSWORD,
)


# =============================================================================
# Pytest Hooks: Detect test type and setup accordingly
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    _setup_test_database()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
TABLES = ('ticket', 'event', 'user')


def _setup_test_database() -> None:
    if settings.IS_SQLITE:
        asyncio.run(_recreate_sqlite_schema())
        return

    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option('sqlalchemy.url', settings.DATABASE_URL_ASYNC)
    command.upgrade(alembic_cfg, 'head')


async def _recreate_sqlite_schema() -> None:
    from src.platform.database.orm_db_setting import (
        create_db_and_tables,
        dispose_engine,
        drop_db_and_tables,
    )

    await drop_db_and_tables()
    await create_db_and_tables()
    await dispose_engine()


async def _clean_all_tables() -> None:
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            if settings.IS_SQLITE:
                for table in TABLES:
                    await conn.execute(text(f'DELETE FROM "{table}"'))
            else:
                quoted = ', '.join(f'"{t}"' for t in TABLES)
                await conn.execute(text(f'TRUNCATE {quoted} RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield

    from src.platform.database.orm_db_setting import _engine_manager, dispose_engine

    try:
        current_loop = asyncio.get_running_loop()
    except RuntimeError:
        current_loop = None

    # Engines created on this test's loop must not outlive it
    if current_loop is not None and _engine_manager._loop is current_loop:
        await dispose_engine()


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    # Lazily get client to avoid creating it for unit tests
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


@pytest.fixture
def execute_sql_statement() -> Callable[..., list[dict[str, Any]] | None]:
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        async def _run() -> list[dict[str, Any]] | None:
            engine = create_async_engine(settings.DATABASE_URL_ASYNC)
            try:
                async with engine.begin() as conn:
                    result = await conn.execute(text(statement), params or {})
                    if fetch:
                        return [dict(row._mapping) for row in result]
                return None
            finally:
                await engine.dispose()

        return asyncio.run(_run())

    return _execute


# =============================================================================
# User / Event Fixtures (function scoped: tables are wiped per test)
# =============================================================================
@pytest.fixture
def customer_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, CUSTOMER_EMAIL, DEFAULT_PASSWORD, CUSTOMER_NAME)


@pytest.fixture
def another_customer_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, ANOTHER_CUSTOMER_EMAIL, DEFAULT_PASSWORD, ANOTHER_CUSTOMER_NAME)


@pytest.fixture
def admin_user(
    client: TestClient, execute_sql_statement: Callable[..., Any]
) -> dict[str, Any]:
    created = create_user(client, ADMIN_EMAIL, DEFAULT_PASSWORD, ADMIN_NAME)
    # Sign-up only creates customers
    execute_sql_statement(
        'UPDATE "user" SET role = :role WHERE id = :id', {'role': 'admin', 'id': created['id']}
    )
    return {**created, 'role': 'admin'}


@pytest.fixture
def customer_headers(client: TestClient, customer_user: dict[str, Any]) -> dict[str, str]:
    return auth_headers(client, CUSTOMER_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def another_customer_headers(
    client: TestClient, another_customer_user: dict[str, Any]
) -> dict[str, str]:
    return auth_headers(client, ANOTHER_CUSTOMER_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def admin_headers(client: TestClient, admin_user: dict[str, Any]) -> dict[str, str]:
    return auth_headers(client, ADMIN_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def sample_event(client: TestClient, admin_headers: dict[str, str]) -> dict[str, Any]:
    return create_event(client, admin_headers, name='Jazz Night', price=10.0, capacity=5)


# =============================================================================
# Load BDD steps and service fixtures
# =============================================================================
from test.bdd_steps_loader import *  # noqa: E402, F401, F403
from test.fixture_loader import *  # noqa: E402, F401, F403
