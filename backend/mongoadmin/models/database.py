"""
Database entity, the root of the aggregated tree.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field

from mongoadmin.models.collection import CollectionEntity


class DatabaseEntity(BaseModel):
    """
    A database with its statistics and collections.

    ``id`` is the position in one listing pass. It is re-derived on every
    listing and is not stable across calls; single database views leave it unset.
    """
    id: Optional[int] = Field(None, description="Enumeration ordinal, valid within one response only")
    name: str = Field(..., description="Database name")
    size_on_disk: Optional[float] = Field(None, description="Size on disk reported by listDatabases")
    empty: Optional[bool] = Field(None, description="Whether the server reports the database as empty")
    stats: dict[str, Any] = Field(default_factory=dict, description="dbstats reply, empty when unavailable")
    collections: list[CollectionEntity] = Field(default_factory=list, description="Collections in server order")
