"""
Bulk-load sink: streams CSV chunks into PostgreSQL with COPY FROM STDIN.

Chunks are forwarded to psycopg's COPY writer as they are pulled from the
upstream iterator, so the full CSV payload is never held in memory. If the
upstream raises, leaving the `copy()` block with an exception aborts the COPY
on the server and the error propagates unchanged.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import psycopg

from epv_loader.pipeline.schema import COLUMNS, TABLE_NAME
from epv_loader.utils.logging import get_logger

log = get_logger(__name__)


def copy_statement(table: str = TABLE_NAME, columns: Sequence[str] = COLUMNS) -> str:
    return (
        f'COPY "{table}" ({",".join(columns)}) '
        "FROM STDIN WITH (FORMAT csv, HEADER true)"
    )


def copy_into_table(
    conn: psycopg.Connection,
    chunks: Iterable[bytes],
    table: str = TABLE_NAME,
    columns: Sequence[str] = COLUMNS,
) -> int:
    """
    Stream CSV chunks (header first) into `table` and commit.

    Returns
    -------
    int
        Number of rows the server reports as copied.
    """
    statement = copy_statement(table, columns)
    log.debug("Starting COPY", extra={"table": table, "sql": statement})

    written = 0
    with conn.cursor() as cur:
        with cur.copy(statement) as copy:
            for chunk in chunks:
                copy.write(chunk)
                written += 1
        # The first chunk is the header line.
        rows = cur.rowcount if cur.rowcount >= 0 else max(written - 1, 0)
    conn.commit()

    log.info(f"COPY into '{table}' complete", extra={"table": table, "rows": rows})
    return rows


__all__ = ["copy_into_table", "copy_statement"]
