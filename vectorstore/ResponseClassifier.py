# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: ResponseClassifier
# -----------------------------------------------------------------------------
from __future__ import annotations

import json
from typing import Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from utility.errors import ResponseFormatError
from vectorstore.schemas import (
    QueryOutcome,
    QueryResponse,
    ServiceErrorResponse,
    UpsertOutcome,
    UpsertResponse,
)

T = TypeVar("T", bound=BaseModel)


def _json_text(raw: bytes | str) -> str:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, (bytes, bytearray)) else raw
    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"Response is not valid JSON: {e}", raw=text) from e
    return text


def _classify(raw: bytes | str, success_model: Type[T]) -> Union[ServiceErrorResponse, T]:
    """
    Service responses carry no discriminator, so the error shape is tried first:
    a body that happens to contain both shapes is reported as an error.

    Models are strict and validated in JSON mode, so {"upsertedCount": "7"}
    matches neither shape.
    """
    text = _json_text(raw)

    try:
        return ServiceErrorResponse.model_validate_json(text)
    except ValidationError:
        pass

    try:
        return success_model.model_validate_json(text)
    except ValidationError as e:
        raise ResponseFormatError(
            f"Response matches neither {success_model.__name__} nor ServiceErrorResponse "
            f"({e.error_count()} validation error(s))",
            raw=text,
        ) from e


def classify_upsert(raw: bytes | str) -> UpsertOutcome:
    return _classify(raw, UpsertResponse)


def classify_query(raw: bytes | str) -> QueryOutcome:
    return _classify(raw, QueryResponse)
