"""
Utilities package for the EPV loader.

Exports shared helpers for logging and profiling. Keep this package free of
pipeline-specific logic.
"""

from epv_loader.utils.logging import configure_logging, get_logger
from epv_loader.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
