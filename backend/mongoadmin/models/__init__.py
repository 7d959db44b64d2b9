"""
Pydantic models for the aggregated database tree.
"""
from mongoadmin.models.collection import CollectionEntity
from mongoadmin.models.database import DatabaseEntity

__all__ = [
    "CollectionEntity",
    "DatabaseEntity",
]
