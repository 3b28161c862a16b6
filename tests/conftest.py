"""
Pytest configuration for the EPV loader.

Provides fixtures for:
- Settings override for integration tests
- Database connection management
- A clean destination table per test
"""

from __future__ import annotations

import os
from typing import Generator

import psycopg
import pytest

from epv_loader.config import ConnectionConfig, Settings, connection_config_from
from epv_loader.pipeline.schema import TABLE_NAME, ensure_table


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "postgres"),
        db_name=os.getenv("DB_NAME", "informer"),
        log_level="DEBUG",
        _env_file=None,
    )


@pytest.fixture(scope="session")
def test_config(test_settings: Settings) -> ConnectionConfig:
    return connection_config_from(test_settings)


@pytest.fixture(scope="session")
def db_connection_available(test_config: ConnectionConfig) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    try:
        with psycopg.connect(test_config.conninfo(), connect_timeout=5) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
        return True
    except psycopg.Error:
        return False


@pytest.fixture(scope="session")
def db_connection(
    test_config: ConnectionConfig, db_connection_available: bool
) -> Generator[psycopg.Connection, None, None]:
    """
    Provide a session-scoped database connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = psycopg.connect(test_config.conninfo())
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def clean_epv_table(db_connection: psycopg.Connection) -> Generator[None, None, None]:
    """
    Ensure the destination table exists and is empty around each test.
    """
    ensure_table(db_connection)
    with db_connection.cursor() as cur:
        cur.execute(f'TRUNCATE TABLE "{TABLE_NAME}";')
    db_connection.commit()
    yield
    with db_connection.cursor() as cur:
        cur.execute(f'TRUNCATE TABLE "{TABLE_NAME}";')
    db_connection.commit()
