from __future__ import annotations

import logging

import pytest

from epv_loader.pipeline.generator import generate_records
from epv_loader.pipeline.progress import log_progress

PROGRESS_LOGGER = "epv_loader.pipeline.progress"


def _progress_messages(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == PROGRESS_LOGGER]


@pytest.mark.parametrize("count", [0, 99, 100, 101, 350])
def test_log_progress_emits_one_line_per_hundred(
    caplog: pytest.LogCaptureFixture, count: int
) -> None:
    caplog.set_level(logging.INFO, logger=PROGRESS_LOGGER)

    list(log_progress(generate_records(count)))

    lines = _progress_messages(caplog)
    assert len(lines) == count // 100
    for k, line in enumerate(lines, start=1):
        assert line.getMessage() == f"{100 * k} records written"
        assert line.records == 100 * k


def test_log_progress_passes_records_through_unchanged() -> None:
    source = list(generate_records(5))

    forwarded = list(log_progress(iter(source)))

    assert len(forwarded) == len(source)
    assert all(a is b for a, b in zip(forwarded, source))


def test_log_progress_pulls_one_record_at_a_time() -> None:
    pulled: list[int] = []

    def source():
        for record in generate_records(3):
            pulled.append(1)
            yield record

    stage = log_progress(source())
    next(stage)

    assert len(pulled) == 1


def test_log_progress_custom_interval(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=PROGRESS_LOGGER)

    list(log_progress(generate_records(10), every=4))

    assert [r.getMessage() for r in _progress_messages(caplog)] == [
        "4 records written",
        "8 records written",
    ]


def test_log_progress_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError, match="positive"):
        list(log_progress(generate_records(1), every=0))
