# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: BatchAccumulator
# -----------------------------------------------------------------------------
from typing import Callable, List

from record.SymbolRecord import SymbolRecord

Batch = List[SymbolRecord]

DEFAULT_BATCH_SIZE = 100


class BatchAccumulator:
    """
    Collects records in arrival order and hands each full batch to `on_batch`.

    The sink is called synchronously as soon as the pending list holds exactly
    `batch_size` records. Whatever is left at end of input comes back from
    flush().
    """

    def __init__(self, on_batch: Callable[[Batch], None], batch_size: int = DEFAULT_BATCH_SIZE):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self.on_batch = on_batch
        self.batch_size = batch_size
        self._pending: Batch = []

    def __len__(self) -> int:
        return len(self._pending)

    def accumulate(self, record: SymbolRecord) -> None:
        self._pending.append(record)
        if len(self._pending) == self.batch_size:
            batch = self._pending
            self._pending = []
            self.on_batch(batch)

    def flush(self) -> Batch:
        batch = self._pending
        self._pending = []
        return batch
