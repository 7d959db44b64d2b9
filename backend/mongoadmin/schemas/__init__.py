"""
Request and response schemas for API endpoints.
"""
from mongoadmin.schemas.mutation import (
    MutationOutcome,
    MutationResult,
    DatabaseCreate,
    DatabaseDelete,
    CollectionCreate,
    CollectionDelete,
)

__all__ = [
    # Results
    "MutationOutcome",
    "MutationResult",
    # Databases
    "DatabaseCreate",
    "DatabaseDelete",
    # Collections
    "CollectionCreate",
    "CollectionDelete",
]
