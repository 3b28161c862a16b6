"""
Database connection factory for the EPV loader.

A load run holds exactly one dedicated connection for its whole lifetime, so
there is no pool here. Connection failures are not retried: the caller sees
the first `psycopg.OperationalError` and the run aborts.
"""

from __future__ import annotations

from typing import Optional

import psycopg
from psycopg import Connection

from epv_loader.config import ConnectionConfig, connection_config_from, get_settings


def build_dsn(config: Optional[ConnectionConfig] = None) -> str:
    """
    Compose a libpq conninfo string.

    Falls back to environment settings when no explicit config is given.
    """
    if config is None:
        config = connection_config_from(get_settings())
    return config.conninfo()


def open_connection(config: ConnectionConfig, connect_timeout: int = 10) -> Connection:
    """
    Open a dedicated synchronous connection.

    Use it as a context manager: leaving the block commits on success, rolls
    back on error, and always closes the connection.

    Raises
    ------
    psycopg.OperationalError
        If the server cannot be reached or rejects the credentials.
    """
    return psycopg.connect(build_dsn(config), connect_timeout=connect_timeout)


__all__ = ["build_dsn", "open_connection"]
