# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: VectorTransport
# -----------------------------------------------------------------------------

from typing import Protocol, runtime_checkable

UPSERT_PATH = "/vectors/upsert"
QUERY_PATH = "/query"


@runtime_checkable
class VectorTransport(Protocol):
    """
    Moves one JSON request body to the index endpoint and returns the raw
    response body.

    Implementations raise TransportError when the exchange itself fails. A
    completed exchange returns its bytes whatever the HTTP status; telling a
    service error apart from a success is left to ResponseClassifier.
    """

    def post(self, path: str, body: bytes) -> bytes:
        ...

    def close(self) -> None:
        ...
