"""
Destination table definition and the idempotent table initializer.
"""

from __future__ import annotations

import psycopg

from epv_loader.utils.logging import get_logger

log = get_logger(__name__)

TABLE_NAME = "test_epv"
COLUMNS = ("first", "last", "amount", "date")


def create_table_statement(table: str = TABLE_NAME) -> str:
    return (
        f'CREATE TABLE IF NOT EXISTS "{table}" '
        "(first text, last text, amount decimal, date timestamptz)"
    )


def ensure_table(conn: psycopg.Connection, table: str = TABLE_NAME) -> None:
    """
    Create the destination table if it does not exist and commit.

    Safe to call repeatedly; an existing table is left untouched.
    """
    with conn.cursor() as cur:
        cur.execute(create_table_statement(table))
    conn.commit()
    log.info(f"Table '{table}' ready", extra={"table": table})


__all__ = ["COLUMNS", "TABLE_NAME", "create_table_statement", "ensure_table"]
