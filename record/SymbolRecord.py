# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: SymbolRecord
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

UINT64_LIMIT = 2 ** 64


class SymbolRecord(BaseModel):
    """
    One named/typed code entity as produced by the indexer, with optional
    precomputed embeddings for its name and its type signature.
    """

    # Strict: no str or bool coercion into the hash fields
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    name: str
    type: str
    module: str
    rev: str
    name_hash: int = Field(..., alias="nameHash", ge=0, lt=UINT64_LIMIT)
    type_hash: int = Field(..., alias="typeHash", ge=0, lt=UINT64_LIMIT)
    name_embedding: Optional[List[float]] = Field(None, alias="nameEmbedding")
    type_embedding: Optional[List[float]] = Field(None, alias="typeEmbedding")

    def to_metadata(self) -> Dict[str, Any]:
        # Embeddings are left out; they already travel as the vector values
        return {
            "name": self.name,
            "type": self.type,
            "module": self.module,
            "rev": self.rev,
            "nameHash": self.name_hash,
            "typeHash": self.type_hash,
        }

    def short_preview(self) -> str:
        """Compact one-liner for logging."""
        return f"{self.module}.{self.name} :: {self.type} @{self.rev}"
