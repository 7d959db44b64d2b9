"""
Create/drop request and result schemas.
"""
from enum import Enum

from pydantic import BaseModel, Field, model_serializer


class MutationOutcome(str, Enum):
    """Outcome of a single drop."""
    SUCCESS = "success"
    FAILED = "failed"


class MutationResult(BaseModel):
    """Result of dropping one named entity, sent as ``{name: outcome}``."""
    name: str
    outcome: MutationOutcome

    @property
    def succeeded(self) -> bool:
        return self.outcome == MutationOutcome.SUCCESS

    @model_serializer
    def as_status(self) -> dict[str, str]:
        return {self.name: self.outcome.value}


class DatabaseCreate(BaseModel):
    """Create database request."""
    database: str = Field(..., min_length=1, max_length=63, description="Database name")


class DatabaseDelete(BaseModel):
    """Drop databases request. Empty names are ignored."""
    names: list[str] = Field(default_factory=list, description="Databases to drop")


class CollectionCreate(BaseModel):
    """Create collection request."""
    database: str = Field(..., min_length=1, description="Owning database")
    collection: str = Field(..., min_length=1, description="Collection name")


class CollectionDelete(BaseModel):
    """Drop collections request. Empty names are ignored."""
    database: str = Field(..., min_length=1, description="Owning database")
    names: list[str] = Field(default_factory=list, description="Collections to drop")
