# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: SymbolVectorStore
# -----------------------------------------------------------------------------

from typing import Protocol, Sequence, runtime_checkable

from vectorstore.schemas import QueryRequest, QueryResponse, VectorRecord


@runtime_checkable
class SymbolVectorStore(Protocol):
    def upsert(self, vectors: Sequence[VectorRecord], namespace: str) -> int:
        ...

    def query(self, request: QueryRequest) -> QueryResponse:
        ...
