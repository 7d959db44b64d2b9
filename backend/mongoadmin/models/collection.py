"""
Collection entity of the aggregated database tree.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class CollectionEntity(BaseModel):
    """
    A collection as reported inside a database entity.

    ``objects`` and ``count`` are only set in detail mode (single database
    view). Documents are driver-native values and are never interpreted.
    """
    id: Optional[int] = Field(None, description="Enumeration ordinal, valid within one response only")
    name: str = Field(..., description="Collection name")
    type: Optional[str] = Field(None, description="Collection type reported by the server")
    options: dict[str, Any] = Field(default_factory=dict, description="Collection creation options")
    objects: Optional[list[dict[str, Any]]] = Field(None, description="Documents (detail mode)")
    count: Optional[int] = Field(None, description="Number of documents returned (detail mode)")

    @model_validator(mode="after")
    def check_count(self) -> "CollectionEntity":
        if self.objects is not None and self.count is not None and self.count != len(self.objects):
            raise ValueError("count must equal the number of objects")
        return self

    @classmethod
    def from_info(
        cls,
        index: int,
        info: dict[str, Any],
        objects: Optional[list[dict[str, Any]]] = None,
    ) -> "CollectionEntity":
        """Build from a ``listCollections`` info document."""
        return cls(
            id=index,
            name=info["name"],
            type=info.get("type"),
            options=info.get("options") or {},
            objects=objects,
            count=len(objects) if objects is not None else None,
        )
