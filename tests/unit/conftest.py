"""
In-memory stand-ins for psycopg connections used by the unit tests.

They record every statement and every COPY chunk so tests can assert on what
would have reached the server, and can be told to fail at a given step.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import pytest


class FakeCopy:
    def __init__(self, cursor: FakeCursor, fail_on_write: Optional[int]) -> None:
        self._cursor = cursor
        self._fail_on_write = fail_on_write
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> None:
        if self._fail_on_write is not None and len(self.chunks) + 1 >= self._fail_on_write:
            raise self._cursor.conn.copy_error
        self.chunks.append(bytes(data))

    def __enter__(self) -> FakeCopy:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        del tb
        self._cursor.conn.copy_aborted = exc_type is not None
        if exc_type is None:
            # Mimic the server's "COPY n" status: data lines after the header.
            self._cursor.rowcount = max(len(self.chunks) - 1, 0)
        return False


class FakeCursor:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        self.rowcount = -1

    def execute(self, sql: str, params: tuple[Any, ...] | None = None) -> None:
        del params
        if self.conn.execute_error is not None:
            raise self.conn.execute_error
        self.conn.statements.append(sql)

    def copy(self, statement: str) -> FakeCopy:
        self.conn.statements.append(statement)
        copy = FakeCopy(self, self.conn.fail_on_write)
        self.conn.copies.append(copy)
        return copy

    def __enter__(self) -> FakeCursor:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        del exc_type, exc, tb
        return False


class FakeConnection:
    def __init__(
        self,
        execute_error: Optional[Exception] = None,
        fail_on_write: Optional[int] = None,
        copy_error: Optional[Exception] = None,
    ) -> None:
        self.execute_error = execute_error
        self.fail_on_write = fail_on_write
        self.copy_error = copy_error or RuntimeError("copy failed")
        self.statements: list[str] = []
        self.copies: list[FakeCopy] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False
        self.copy_aborted = False

    @property
    def copied(self) -> bytes:
        return b"".join(chunk for copy in self.copies for chunk in copy.chunks)

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeConnection:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        del exc, tb
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self.close()
        return False


@pytest.fixture
def make_fake_connection() -> Callable[..., FakeConnection]:
    def _make(**kwargs: Any) -> FakeConnection:
        return FakeConnection(**kwargs)

    return _make
