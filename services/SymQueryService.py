# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: SymQueryService
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from vectorstore.SymbolVectorStore import SymbolVectorStore
from vectorstore.schemas import QueryRequest, QueryResponse


@dataclass
class SymQueryService:
    store: SymbolVectorStore
    default_namespace: Optional[str] = "name"

    def query(
        self,
        vector: Sequence[float],
        top_k: int = 10,
        namespace: Optional[str] = None,
        include_values: bool = False,
        include_metadata: bool = True,
        filter: Optional[Dict[str, Any]] = None,
    ) -> QueryResponse:
        request = QueryRequest(
            top_k=top_k,
            vector=list(vector),
            namespace=namespace if namespace is not None else self.default_namespace,
            include_values=include_values,
            include_metadata=include_metadata,
            filter=filter,
        )
        return self.store.query(request)

    @staticmethod
    def to_hits(resp: QueryResponse) -> List[Dict[str, Any]]:
        """
        Flatten matches into plain dicts, lifting the symbol fields out of metadata.
        Higher score means more similar.
        """
        hits: List[Dict[str, Any]] = []
        for m in resp.matches:
            md = m.metadata if isinstance(m.metadata, dict) else {}
            hits.append({
                "id": m.id,
                "score": m.score,
                "name": md.get("name"),
                "type": md.get("type"),
                "module": md.get("module"),
                "rev": md.get("rev"),
                "namespace": resp.namespace,
            })
        return hits
