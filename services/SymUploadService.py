# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: SymUploadService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from ingestion.BatchAccumulator import Batch, BatchAccumulator, DEFAULT_BATCH_SIZE
from ingestion.PartitionProjector import Partition, PartitionProjector
from loader.SymbolRecordReader import SymbolRecordReader
from record.SymbolRecord import SymbolRecord
from utility.logging_utils import get_class_logger
from vectorstore.SymbolVectorStore import SymbolVectorStore


@dataclass
class UploadSummary:
    records_read: int = 0
    batches: int = 0
    uploaded_name: int = 0
    uploaded_type: int = 0


def print_report(line: str) -> None:
    print(line, flush=True)


class SymUploadService:
    """
    Owns the upload pipeline:
      - decode records (via SymbolRecordReader)
      - accumulate fixed-size batches
      - project each batch onto the name and type partitions
      - upsert name, then type, before touching the next batch

    Every batch reports one line per partition. A partition with no embeddings
    in the batch is reported as 0 without calling the store, so a batch makes
    zero, one or two upsert calls.

    Any error stops the run; nothing is retried or skipped.
    """

    def __init__(
        self,
        *,
        store: SymbolVectorStore,
        projector: PartitionProjector | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        name_namespace: str = Partition.NAME.value,
        type_namespace: str = Partition.TYPE.value,
        report: Callable[[str], None] = print_report,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.projector = projector or PartitionProjector()
        self.batch_size = batch_size
        self.namespaces = {
            Partition.NAME: name_namespace,
            Partition.TYPE: type_namespace,
        }
        self.report = report
        self.logger = logger or get_class_logger(self.__class__)

    def upload_file(self, path: str | Path) -> UploadSummary:
        return self.upload_records(SymbolRecordReader(path, logger=self.logger))

    def upload_records(self, records: Iterable[SymbolRecord]) -> UploadSummary:
        summary = UploadSummary()
        accumulator = BatchAccumulator(
            on_batch=lambda batch: self._upload_batch(batch, summary),
            batch_size=self.batch_size,
        )

        for record in records:
            summary.records_read += 1
            accumulator.accumulate(record)

        tail = accumulator.flush()
        if tail:
            self._upload_batch(tail, summary)

        self.logger.info(
            "Upload complete: %d records read, %d batches, %d name vectors, %d type vectors",
            summary.records_read,
            summary.batches,
            summary.uploaded_name,
            summary.uploaded_type,
        )
        return summary

    def _upload_batch(self, batch: Batch, summary: UploadSummary) -> None:
        summary.batches += 1
        self.logger.info("Uploading batch %d (%d records)", summary.batches, len(batch))

        for partition in (Partition.NAME, Partition.TYPE):
            count = self._upload_partition(batch, partition)
            if partition is Partition.NAME:
                summary.uploaded_name += count
            else:
                summary.uploaded_type += count

    def _upload_partition(self, batch: Batch, partition: Partition) -> int:
        vectors = self.projector.project(batch, partition)
        namespace = self.namespaces[partition]

        if not vectors:
            self.logger.warning(
                "No %s embeddings in batch of %d records; skipping upsert", partition.value, len(batch)
            )
            count = 0
        else:
            count = self.store.upsert(vectors, namespace)

        self.report(f"Uploaded {count} for {partition.value} batch of size {len(vectors)}")
        return count

