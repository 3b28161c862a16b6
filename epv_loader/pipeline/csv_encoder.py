"""
CSV encoding stage.

Turns an ordered stream of records into an ordered stream of CSV-encoded byte
chunks: the header line first, then one chunk per record. Quoting and escaping
follow the standard `csv` writer (fields holding the delimiter, a quote or a
newline are quoted; embedded quotes are doubled).
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Iterator, List, Sequence

from epv_loader.domain.models import Record
from epv_loader.pipeline.schema import COLUMNS


def record_to_row(record: Record, columns: Sequence[str] = COLUMNS) -> List[str]:
    """Project a record onto the column order as CSV field strings."""
    return [str(getattr(record, column)) for column in columns]


def encode_csv(
    records: Iterable[Record],
    columns: Sequence[str] = COLUMNS,
    encoding: str = "utf-8",
) -> Iterator[bytes]:
    """
    Yield the header line followed by one encoded line per record.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    def _drain() -> bytes:
        chunk = buffer.getvalue().encode(encoding)
        buffer.seek(0)
        buffer.truncate()
        return chunk

    writer.writerow(columns)
    yield _drain()

    for record in records:
        writer.writerow(record_to_row(record, columns))
        yield _drain()


__all__ = ["encode_csv", "record_to_row"]
