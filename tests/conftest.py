"""
Global test fixtures for the Mongo Admin console.

This module provides shared fixtures for all tests including:
- Import paths for the backend and frontend packages
- Mock MongoDB (mongomock-motor)
- Sample documents
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio
from bson import ObjectId

# Add backend and repository root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "backend"))
sys.path.insert(0, str(ROOT))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def sample_documents() -> list[dict]:
    """Driver-native documents with BSON values."""
    return [
        {
            "_id": ObjectId("507f1f77bcf86cd799439011"),
            "email": "alice@example.com",
            "created_at": datetime(2024, 12, 29, 10, 0, tzinfo=timezone.utc),
        },
        {
            "_id": ObjectId("507f1f77bcf86cd799439022"),
            "email": "bob@example.com",
            "created_at": datetime(2024, 12, 30, 10, 0, tzinfo=timezone.utc),
        },
    ]
