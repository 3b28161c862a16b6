"""
Load orchestration: connect, prepare the table, stream the pipeline.

A run moves strictly forward through
`CONNECTING -> TABLE_READY -> STREAMING -> COMPLETED`, and any failure jumps
straight to `FAILED`. Nothing is retried. The connection is scoped with a
`with` block so it is closed on every exit path.

Usage (example from CLI):
    from epv_loader.config import connection_config_from, get_settings
    from epv_loader.loader import run_load

    config = connection_config_from(get_settings(), host="db.internal")
    result = run_load(config, records=10_000)
    print(result["rows"], result["throughput_rows_per_sec"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional, TypedDict

import psycopg

from epv_loader.config import ConnectionConfig
from epv_loader.errors import (
    DatabaseConnectionError,
    LoadError,
    LoadState,
    StreamingError,
    TableSetupError,
)
from epv_loader.infrastructure.db_factory import open_connection
from epv_loader.pipeline.csv_encoder import encode_csv
from epv_loader.pipeline.generator import DEFAULT_RECORD_COUNT, generate_records
from epv_loader.pipeline.progress import log_progress
from epv_loader.pipeline.schema import TABLE_NAME, ensure_table
from epv_loader.pipeline.sink import copy_into_table
from epv_loader.utils.logging import get_logger
from epv_loader.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

Connector = Callable[[ConnectionConfig], psycopg.Connection]


class LoadResult(TypedDict, total=False):
    """
    Metrics returned by a completed load run.
    """

    table: str
    state: str
    records: int
    rows: int
    duration_seconds: float
    throughput_rows_per_sec: float
    peak_rss_bytes: Optional[int]
    cpu_percent: Optional[float]


def build_pipeline(records: int) -> Iterator[bytes]:
    """Chain generator -> progress logger -> CSV encoder into one byte-chunk iterator."""
    return encode_csv(log_progress(generate_records(records)))


def _enter(state: LoadState, **extra: object) -> LoadState:
    log.info(f"[STATE] {state.value}", extra={"state": state.value, **extra})
    return state


def _build_result(table: str, records: int, rows: int, stats: ProfileStats) -> LoadResult:
    duration = stats.duration_seconds
    return LoadResult(
        table=table,
        state=LoadState.COMPLETED.value,
        records=records,
        rows=rows,
        duration_seconds=round(duration, 2),
        throughput_rows_per_sec=round(rows / duration, 2) if duration > 0 else 0.0,
        peak_rss_bytes=stats.peak_rss_bytes,
        cpu_percent=round(stats.cpu_percent, 1) if stats.cpu_percent else None,
    )


def _load(conn: psycopg.Connection, table: str, records: int) -> int:
    try:
        ensure_table(conn, table)
    except psycopg.Error as exc:
        raise TableSetupError(f"Could not create table '{table}': {exc}") from exc
    _enter(LoadState.TABLE_READY, table=table)

    _enter(LoadState.STREAMING, table=table, records=records)
    try:
        return copy_into_table(conn, build_pipeline(records), table=table)
    except Exception as exc:
        raise StreamingError(f"Bulk load into '{table}' failed: {exc}") from exc


def run_load(
    config: ConnectionConfig,
    records: int = DEFAULT_RECORD_COUNT,
    *,
    table: str = TABLE_NAME,
    connect: Connector = open_connection,
) -> LoadResult:
    """
    Run one load: connect, ensure the table exists, then COPY `records` rows.

    Parameters
    ----------
    config : ConnectionConfig
        Where to connect and as whom.
    records : int
        Number of synthetic records to generate. Non-positive loads nothing.
    table : str
        Destination table name.
    connect : Connector
        Connection factory; swapped out in tests.

    Raises
    ------
    DatabaseConnectionError
        The database could not be reached; nothing else was attempted.
    TableSetupError
        Table creation failed; no rows were streamed.
    StreamingError
        The COPY was aborted; the server rolls back the whole command.
    """
    log.info(
        f"[LOAD START] {records} records -> {table} @ {config.masked()}",
        extra={"records": records, "table": table},
    )
    try:
        with profile_block("load") as stats:
            _enter(LoadState.CONNECTING, target=config.masked())
            try:
                conn = connect(config)
            except psycopg.Error as exc:
                raise DatabaseConnectionError(
                    f"Could not connect to {config.masked()}: {exc}"
                ) from exc

            with conn:
                rows = _load(conn, table, records)
    except LoadError as exc:
        log.exception(
            f"[LOAD FAILED] during {exc.state.value}",
            extra={"state": LoadState.FAILED.value, "failed_stage": exc.state.value},
        )
        raise

    _enter(LoadState.COMPLETED, rows=rows)
    result = _build_result(table, records, rows, stats)
    log.info(
        f"[LOAD SUCCESS] {rows} rows in {result['duration_seconds']}s",
        extra={"rows": rows, "duration": result["duration_seconds"]},
    )
    return result


def export_csv(path: Path | str, records: int = DEFAULT_RECORD_COUNT) -> int:
    """
    Write the CSV stream to a file instead of the database.

    Returns the number of records written (the header line is not counted).
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    chunks = 0
    with target.open("wb") as f:
        for chunk in build_pipeline(records):
            f.write(chunk)
            chunks += 1

    written = max(chunks - 1, 0)
    log.info(f"Exported {written} records", extra={"path": str(target), "records": written})
    return written


__all__ = ["LoadResult", "build_pipeline", "export_csv", "run_load"]
