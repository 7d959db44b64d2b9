"""
Backend test fixtures.

Provides an in-memory ``MongoDriver`` double and a FastAPI test client whose
per-request driver dependency is replaced by it.
"""
from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import OperationFailure


class FakeDriver:
    """
    In-memory ``MongoDriver``.

    ``databases`` maps database name -> collection name -> documents.
    Failures are injected per database / collection through the sets below.
    """

    def __init__(self, databases: Optional[dict] = None):
        self.databases = databases if databases is not None else {}
        self.list_error: Optional[Exception] = None
        self.failing_stats: set[str] = set()
        self.failing_collections: set[str] = set()
        self.failing_documents: set[tuple[str, str]] = set()
        self.failing_drops: set[str] = set()
        self.drop_acks: dict[str, dict] = {}
        self.create_error: Optional[Exception] = None
        self.stats_calls: list[str] = []
        self.closed = False

    async def list_databases(self) -> list[dict]:
        if self.list_error is not None:
            raise self.list_error
        return [
            {"name": name, "sizeOnDisk": 8192.0, "empty": not collections}
            for name, collections in self.databases.items()
        ]

    async def stats_for(self, database: str) -> dict:
        self.stats_calls.append(database)
        if database in self.failing_stats:
            raise OperationFailure(f"not authorized on {database} to execute command")
        collections = self.databases.get(database, {})
        return {
            "db": database,
            "collections": len(collections),
            "objects": sum(len(docs) for docs in collections.values()),
            "dataSize": 1024.0,
            "ok": 1.0,
        }

    async def list_collections(self, database: str) -> list[dict]:
        if database in self.failing_collections:
            raise OperationFailure(f"not authorized on {database} to list collections")
        return [
            {"name": name, "type": "collection", "options": {}}
            for name in self.databases.get(database, {})
        ]

    async def find_documents(self, database: str, collection: str, limit: int = 0) -> list[dict]:
        if (database, collection) in self.failing_documents:
            raise OperationFailure(f"cursor failed on {database}.{collection}")
        documents = list(self.databases.get(database, {}).get(collection, []))
        return documents[:limit] if limit else documents

    async def create_bootstrap(self, database: str, collection: str) -> None:
        await self.create_collection(database, collection)

    async def create_collection(self, database: str, collection: str) -> None:
        if self.create_error is not None:
            raise self.create_error
        self.databases.setdefault(database, {}).setdefault(collection, [])

    async def drop(self, database: str) -> dict:
        if database in self.failing_drops:
            raise OperationFailure(f"not authorized on {database} to drop")
        if database in self.drop_acks:
            return self.drop_acks[database]
        self.databases.pop(database, None)
        return {"dropped": database, "ok": 1}

    async def drop_collection(self, database: str, collection: str) -> dict:
        collections = self.databases.get(database, {})
        if collection not in collections:
            return {"dropped": None, "ok": 1.0}
        del collections[collection]
        return {"dropped": collection, "ok": 1.0}

    async def ping(self) -> dict:
        return {"ok": 1.0}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def driver_factory():
    """Build a ``FakeDriver`` from a databases mapping."""
    return FakeDriver


@pytest.fixture
def fake_driver(sample_documents) -> FakeDriver:
    """Server with an admin database and an app database holding documents."""
    return FakeDriver({
        "admin": {"system.version": [{"_id": "featureCompatibilityVersion", "version": "7.0"}]},
        "shop": {"users": sample_documents, "orders": []},
    })


@pytest.fixture
def app(fake_driver):
    """
    FastAPI app with the per-request driver replaced by ``fake_driver``.
    """
    from mongoadmin.database.connections import get_driver
    from mongoadmin.main import app

    async def override_driver():
        yield fake_driver

    app.dependency_overrides[get_driver] = override_driver
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.
    """
    with TestClient(app) as c:
        yield c
