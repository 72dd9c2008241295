# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: PartitionProjector
# -----------------------------------------------------------------------------
from enum import Enum
from typing import List, Optional, Sequence

from record.SymbolRecord import SymbolRecord
from vectorstore.schemas import VectorRecord


class Partition(str, Enum):
    NAME = "name"
    TYPE = "type"


class IdSource(str, Enum):
    NAME_HASH = "name_hash"
    TYPE_HASH = "type_hash"


class PartitionProjector:
    """
    Maps a batch of SymbolRecords onto the vectors for one partition.

    Only records that carry the partition's embedding are projected. The name
    partition is always keyed by the name hash. The type partition is keyed by
    `type_id_source`, which defaults to the name hash: that is what existing
    indexes were built with, so switching to TYPE_HASH changes every id in the
    "type" namespace.
    """

    def __init__(self, type_id_source: IdSource = IdSource.NAME_HASH):
        self.type_id_source = IdSource(type_id_source)

    def project(self, batch: Sequence[SymbolRecord], partition: Partition) -> List[VectorRecord]:
        partition = Partition(partition)
        out: List[VectorRecord] = []
        for rec in batch:
            values = self._embedding_for(rec, partition)
            if values is None:
                continue
            out.append(VectorRecord(
                id=self._id_for(rec, partition),
                values=values,
                metadata=rec.to_metadata(),
            ))
        return out

    @staticmethod
    def _embedding_for(rec: SymbolRecord, partition: Partition) -> Optional[List[float]]:
        if partition is Partition.NAME:
            return rec.name_embedding
        return rec.type_embedding

    def _id_for(self, rec: SymbolRecord, partition: Partition) -> str:
        if partition is Partition.TYPE and self.type_id_source is IdSource.TYPE_HASH:
            return str(rec.type_hash)
        return str(rec.name_hash)


def project(
    batch: Sequence[SymbolRecord],
    partition: Partition,
    type_id_source: IdSource = IdSource.NAME_HASH,
) -> List[VectorRecord]:
    return PartitionProjector(type_id_source).project(batch, partition)
