"""
Synthetic record generator.

Produces a bounded, lazy sequence of `Record` objects. The sequence is a plain
generator: the consumer pulls one record at a time and nothing is computed
ahead of demand.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterator

from epv_loader.domain.models import Record

DEFAULT_RECORD_COUNT = 100
FIRST_NAME = "Test"
AMOUNT = Decimal("200000")


def make_record(index: int) -> Record:
    """Build the record for a given zero-based index, stamped with the current time."""
    return Record(
        first=FIRST_NAME,
        last=f"User {index}",
        amount=AMOUNT,
        date=datetime.now(timezone.utc).isoformat(),
    )


def generate_records(count: int = DEFAULT_RECORD_COUNT) -> Iterator[Record]:
    """
    Yield exactly `count` records with indices 0..count-1.

    A non-positive count yields nothing.
    """
    for index in range(max(count, 0)):
        yield make_record(index)


__all__ = ["AMOUNT", "DEFAULT_RECORD_COUNT", "FIRST_NAME", "generate_records", "make_record"]
