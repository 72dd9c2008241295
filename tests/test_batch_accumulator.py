# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-11
# Description: test_batch_accumulator.py
# -----------------------------------------------------------------------------
import pytest

from conftest import make_record
from ingestion.BatchAccumulator import BatchAccumulator


def _run(total: int, batch_size: int = 100):
    handed = []
    acc = BatchAccumulator(on_batch=handed.append, batch_size=batch_size)
    for i in range(total):
        acc.accumulate(make_record(i))
    return handed, acc.flush()


@pytest.mark.parametrize(
    "total,expected_full,expected_tail",
    [
        (0, 0, 0),
        (1, 0, 1),
        (99, 0, 99),
        (100, 1, 0),
        (150, 1, 50),
        (250, 2, 50),
        (300, 3, 0),
    ],
)
def test_full_batches_are_exactly_batch_size(total, expected_full, expected_tail):
    handed, tail = _run(total)

    assert len(handed) == expected_full
    assert all(len(b) == 100 for b in handed)
    assert len(tail) == expected_tail


def test_arrival_order_is_kept_across_batches():
    handed, tail = _run(7, batch_size=3)
    names = [r.name for b in handed + [tail] for r in b]
    assert names == [f"fn{i}" for i in range(7)]


def test_batch_is_handed_off_the_moment_it_fills():
    handed = []
    acc = BatchAccumulator(on_batch=handed.append, batch_size=2)

    acc.accumulate(make_record(0))
    assert handed == [] and len(acc) == 1

    acc.accumulate(make_record(1))
    assert len(handed) == 1 and len(acc) == 0


def test_flush_resets_pending():
    acc = BatchAccumulator(on_batch=lambda b: None, batch_size=10)
    acc.accumulate(make_record(0))
    assert len(acc.flush()) == 1
    assert acc.flush() == []


def test_handed_batches_are_independent_lists():
    handed, _ = _run(4, batch_size=2)
    assert handed[0] is not handed[1]
    assert [r.name for r in handed[0]] == ["fn0", "fn1"]


def test_batch_size_must_be_positive():
    with pytest.raises(ValueError):
        BatchAccumulator(on_batch=lambda b: None, batch_size=0)
