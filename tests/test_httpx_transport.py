# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: test_httpx_transport.py
# -----------------------------------------------------------------------------
import json

import httpx
import pytest

from utility.errors import ServiceError, TransportError
from vectorstore.HttpxVectorTransport import HttpxVectorTransport
from vectorstore.PineconeSymbolVectorStore import PineconeSymbolVectorStore
from vectorstore.VectorTransport import UPSERT_PATH, VectorTransport
from vectorstore.schemas import QueryRequest, VectorRecord


def test_posts_to_index_host_with_headers(cfg, service):
    transport = HttpxVectorTransport(cfg, transport=service.mock_transport())
    assert isinstance(transport, VectorTransport)

    raw = transport.post(UPSERT_PATH, b'{"vectors": [], "namespace": "name"}')

    assert json.loads(raw) == {"upsertedCount": 0}
    [req] = service.requests
    assert req.method == "POST"
    assert str(req.url) == "https://symbols-abc123.svc.us-west1-gcp.pinecone.io/vectors/upsert"
    assert req.headers["Api-Key"] == "test-key"
    assert req.headers["Content-Type"] == "application/json"


def test_custom_service_domain(cfg, service):
    transport = HttpxVectorTransport(cfg, service_domain="example.test", transport=service.mock_transport())
    transport.post("/query", b"{}")
    assert service.requests[0].url.host == "symbols-abc123.svc.us-west1-gcp.example.test"


def test_http_error_status_still_returns_body(cfg):
    payload = {"code": 429, "message": "rate limited", "details": []}
    mock = httpx.MockTransport(lambda request: httpx.Response(429, json=payload))
    transport = HttpxVectorTransport(cfg, transport=mock)

    assert json.loads(transport.post(UPSERT_PATH, b"{}")) == payload


def test_connection_failure_is_transport_error(cfg):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxVectorTransport(cfg, transport=httpx.MockTransport(refuse))

    with pytest.raises(TransportError) as exc:
        transport.post(UPSERT_PATH, b"{}")
    assert "connection refused" in exc.value.diagnostic
    assert exc.value.url.endswith("/vectors/upsert")


def test_large_response_is_drained_completely(cfg):
    big = {"namespace": "name", "matches": [{"id": str(i), "score": 0.1} for i in range(20000)]}
    mock = httpx.MockTransport(lambda request: httpx.Response(200, json=big))
    transport = HttpxVectorTransport(cfg, transport=mock)

    assert json.loads(transport.post("/query", b"{}")) == big


def test_store_upsert_sends_vectors_and_namespace(cfg, service):
    store = PineconeSymbolVectorStore(transport=HttpxVectorTransport(cfg, transport=service.mock_transport()))
    vectors = [VectorRecord(id="1", values=[0.1, 0.2], metadata={"name": "fn1"})]

    assert store.upsert(vectors, "type") == 1
    assert service.bodies[0] == {
        "vectors": [{"id": "1", "values": [0.1, 0.2], "metadata": {"name": "fn1"}}],
        "namespace": "type",
    }


def test_store_upsert_raises_service_error(cfg):
    payload = {"code": 3, "message": "dimension mismatch", "details": [{"typeUrl": "t", "value": "v"}]}
    mock = httpx.MockTransport(lambda request: httpx.Response(400, json=payload))
    store = PineconeSymbolVectorStore(transport=HttpxVectorTransport(cfg, transport=mock))

    with pytest.raises(ServiceError) as exc:
        store.upsert([VectorRecord(id="1", values=[0.1])], "name")

    assert exc.value.code == 3
    assert exc.value.message == "dimension mismatch"
    assert exc.value.details == [{"typeUrl": "t", "value": "v"}]


def test_store_query_round_trip(cfg):
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.read())
        return httpx.Response(200, json={
            "namespace": "name",
            "matches": [{"id": "1001", "score": 0.9, "metadata": {"name": "fn1"}}],
        })

    store = PineconeSymbolVectorStore(transport=HttpxVectorTransport(cfg, transport=httpx.MockTransport(handler)))
    resp = store.query(QueryRequest(top_k=2, vector=[0.1, 0.2], namespace="name"))

    assert seen["path"] == "/query"
    assert seen["body"]["topK"] == 2
    assert seen["body"]["vector"] == [0.1, 0.2]
    assert resp.matches[0].id == "1001"
    assert resp.matches[0].score == pytest.approx(0.9)
