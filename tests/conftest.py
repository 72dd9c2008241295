# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: conftest.py
# -----------------------------------------------------------------------------

import json
import sys
from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.Config import Config  # noqa: E402
from record.SymbolRecord import SymbolRecord  # noqa: E402


def record_dict(
    i: int,
    *,
    name_embedding: bool = True,
    type_embedding: bool = True,
    dim: int = 4,
) -> dict:
    """JSON-shaped symbol record; hashes are derived from i so ids stay predictable."""
    d = {
        "name": f"fn{i}",
        "type": f"Int -> T{i}",
        "module": "Data.Sample",
        "rev": "1.0.0",
        "nameHash": 1000 + i,
        "typeHash": 5000 + i,
    }
    if name_embedding:
        d["nameEmbedding"] = [float(i)] * dim
    if type_embedding:
        d["typeEmbedding"] = [float(-i)] * dim
    return d


def make_record(i: int, **kwargs) -> SymbolRecord:
    return SymbolRecord.model_validate(record_dict(i, **kwargs))


def write_jsonl(path: Path, rows: List[dict]) -> Path:
    path.write_text("".join(json.dumps(r) + "\n" for r in rows), encoding="utf-8")
    return path


@pytest.fixture
def cfg() -> Config:
    return Config(api_key="test-key", project="abc123", index="symbols", environment="us-west1-gcp")


class RecordingService:
    """
    Stand-in for the index endpoint, used as an httpx.MockTransport handler.

    Accepts every upsert (upsertedCount = number of vectors) unless a canned
    response is registered for a given call number (1-based).
    """

    def __init__(self, canned: Optional[dict] = None) -> None:
        self.canned = canned or {}
        self.requests: List[httpx.Request] = []
        self.bodies: List[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.read())
        self.bodies.append(body)

        call_no = len(self.requests)
        if call_no in self.canned:
            status, payload = self.canned[call_no]
            return httpx.Response(status, json=payload)

        if request.url.path == "/vectors/upsert":
            return httpx.Response(200, json={"upsertedCount": len(body["vectors"])})
        return httpx.Response(200, json={"namespace": body.get("namespace") or "", "matches": []})

    def mock_transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def service() -> RecordingService:
    return RecordingService()


@pytest.fixture
def report_lines() -> List[str]:
    return []


@pytest.fixture
def reporter(report_lines) -> Callable[[str], None]:
    return report_lines.append
