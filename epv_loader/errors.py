"""
Error taxonomy for a load run.

Each error records the `LoadState` of the stage that failed. The
underlying driver or encoder exception is always chained as `__cause__`.
"""

from __future__ import annotations

from enum import Enum


class LoadState(str, Enum):
    """Lifecycle of a single load run."""

    CONNECTING = "connecting"
    TABLE_READY = "table_ready"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"


class LoadError(Exception):
    """Base class for failures that abort a load run."""

    def __init__(self, message: str, state: LoadState) -> None:
        super().__init__(message)
        self.state = state


class DatabaseConnectionError(LoadError):
    """The database could not be reached or refused the credentials."""

    def __init__(self, message: str) -> None:
        super().__init__(message, LoadState.CONNECTING)


class TableSetupError(LoadError):
    """The destination table could not be created."""

    def __init__(self, message: str) -> None:
        super().__init__(message, LoadState.TABLE_READY)


class StreamingError(LoadError):
    """The COPY stream was interrupted or rejected by the server."""

    def __init__(self, message: str) -> None:
        super().__init__(message, LoadState.STREAMING)


__all__ = [
    "DatabaseConnectionError",
    "LoadError",
    "LoadState",
    "StreamingError",
    "TableSetupError",
]
