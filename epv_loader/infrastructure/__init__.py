"""
Infrastructure package for the EPV loader.

Centralizes database connectivity. Keep this layer focused on I/O and resource
management, decoupled from the pipeline stages.
"""

from epv_loader.infrastructure.db_factory import build_dsn, open_connection

__all__ = [
    "build_dsn",
    "open_connection",
]
