"""
EPV Loader - synthetic test data bulk-loader for PostgreSQL.

Generates a configurable number of synthetic records, encodes them as CSV, and
streams them into a table with COPY FROM STDIN:

- Record generator (lazy, bounded)
- Progress logger (pass-through, logs every 100 records)
- CSV encoder (header + one line per record)
- COPY sink (psycopg, no full buffering)

The table is created idempotently before streaming starts.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from epv_loader.config import ConnectionConfig, Settings, connection_config_from, get_settings
from epv_loader.domain.models import Record
from epv_loader.errors import (
    DatabaseConnectionError,
    LoadError,
    LoadState,
    StreamingError,
    TableSetupError,
)
from epv_loader.loader import LoadResult, build_pipeline, export_csv, run_load
from epv_loader.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "ConnectionConfig",
    "Settings",
    "connection_config_from",
    "get_settings",
    # Domain
    "Record",
    # Loading
    "LoadResult",
    "build_pipeline",
    "export_csv",
    "run_load",
    # Errors
    "DatabaseConnectionError",
    "LoadError",
    "LoadState",
    "StreamingError",
    "TableSetupError",
    # Logging
    "configure_logging",
    "get_logger",
]
