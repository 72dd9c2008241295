# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: schemas.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    # JSON uses camelCase; Python code may use either name. No type coercion.
    model_config = ConfigDict(populate_by_name=True, strict=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class VectorRecord(_WireModel):
    id: str
    values: List[float]
    metadata: Optional[Dict[str, Any]] = None


class UpsertRequest(_WireModel):
    vectors: List[VectorRecord]
    namespace: str


class UpsertResponse(_WireModel):
    upserted_count: int = Field(..., alias="upsertedCount", ge=0)


class ErrorDetail(_WireModel):
    type_url: str = Field(..., alias="typeUrl")
    value: str


class ServiceErrorResponse(_WireModel):
    code: int
    message: str
    details: List[ErrorDetail]


class QueryRequest(_WireModel):
    top_k: int = Field(..., alias="topK", ge=1)
    vector: List[float]
    namespace: Optional[str] = None
    include_values: bool = Field(False, alias="includeValues")
    include_metadata: bool = Field(True, alias="includeMetadata")
    filter: Optional[Dict[str, Any]] = None


class Match(_WireModel):
    id: str
    score: float
    values: Optional[List[float]] = None
    metadata: Optional[Dict[str, Any]] = None


class QueryResponse(_WireModel):
    namespace: str
    matches: List[Match]


UpsertOutcome = Union[UpsertResponse, ServiceErrorResponse]
QueryOutcome = Union[QueryResponse, ServiceErrorResponse]
