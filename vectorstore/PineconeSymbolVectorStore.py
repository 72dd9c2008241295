# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-07
# Description: PineconeSymbolVectorStore
# -----------------------------------------------------------------------------
import json
from dataclasses import dataclass
from typing import Any, Sequence

from utility.errors import ServiceError
from utility.logging_utils import get_class_logger
from vectorstore.ResponseClassifier import classify_query, classify_upsert
from vectorstore.SymbolVectorStore import SymbolVectorStore
from vectorstore.VectorTransport import QUERY_PATH, UPSERT_PATH, VectorTransport
from vectorstore.schemas import (
    QueryRequest,
    QueryResponse,
    ServiceErrorResponse,
    UpsertRequest,
    VectorRecord,
)


def _encode(payload: dict) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _raise_service_error(outcome: ServiceErrorResponse) -> None:
    raise ServiceError(
        code=outcome.code,
        message=outcome.message,
        details=[d.to_wire() for d in outcome.details],
    )


@dataclass
class PineconeSymbolVectorStore(SymbolVectorStore):
    """Pinecone index client: serializes payloads, posts them, classifies the answer."""

    transport: VectorTransport
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def upsert(self, vectors: Sequence[VectorRecord], namespace: str) -> int:
        body = _encode(UpsertRequest(vectors=list(vectors), namespace=namespace).to_wire())
        self.logger.debug(
            "Upserting %d vectors into namespace '%s' (%d bytes)", len(vectors), namespace, len(body)
        )

        outcome = classify_upsert(self.transport.post(UPSERT_PATH, body))
        if isinstance(outcome, ServiceErrorResponse):
            self.logger.error(
                "Upsert into namespace '%s' rejected: code=%d message=%s",
                namespace,
                outcome.code,
                outcome.message,
            )
            _raise_service_error(outcome)

        self.logger.info(
            "Service accepted %d/%d vectors for namespace '%s'",
            outcome.upserted_count,
            len(vectors),
            namespace,
        )
        return outcome.upserted_count

    def query(self, request: QueryRequest) -> QueryResponse:
        self.logger.info(
            "Querying namespace %r (top_k=%d, filter=%s)",
            request.namespace,
            request.top_k,
            request.filter,
        )
        outcome = classify_query(self.transport.post(QUERY_PATH, _encode(request.to_wire())))
        if isinstance(outcome, ServiceErrorResponse):
            self.logger.error("Query rejected: code=%d message=%s", outcome.code, outcome.message)
            _raise_service_error(outcome)

        self.logger.info("Query complete: returned %d matches", len(outcome.matches))
        return outcome

    def close(self) -> None:
        self.transport.close()
