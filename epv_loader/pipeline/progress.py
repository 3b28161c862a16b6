from __future__ import annotations

from typing import Iterable, Iterator

from epv_loader.domain.models import Record
from epv_loader.utils.logging import get_logger

log = get_logger(__name__)

PROGRESS_INTERVAL = 100


def log_progress(records: Iterable[Record], every: int = PROGRESS_INTERVAL) -> Iterator[Record]:
    """
    Pass records through unchanged, logging the running count every `every` records.
    """
    if every <= 0:
        raise ValueError(f"Progress interval must be positive, got {every}")

    count = 0
    for record in records:
        count += 1
        if count % every == 0:
            log.info(f"{count} records written", extra={"records": count})
        yield record


__all__ = ["PROGRESS_INTERVAL", "log_progress"]
