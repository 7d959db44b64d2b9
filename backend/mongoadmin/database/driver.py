"""
MongoDB driver capability interface and its motor adapter.

The aggregation and mutation services only talk to a ``MongoDriver``, so they
can run against the motor adapter in production and an in-memory double in
tests.
"""
from typing import Any, Protocol

from motor.motor_asyncio import AsyncIOMotorClient


class MongoDriver(Protocol):
    """Operations the admin services need from a MongoDB connection."""

    async def list_databases(self) -> list[dict[str, Any]]:
        ...

    async def stats_for(self, database: str) -> dict[str, Any]:
        ...

    async def list_collections(self, database: str) -> list[dict[str, Any]]:
        ...

    async def find_documents(
        self, database: str, collection: str, limit: int = 0
    ) -> list[dict[str, Any]]:
        ...

    async def create_bootstrap(self, database: str, collection: str) -> None:
        ...

    async def create_collection(self, database: str, collection: str) -> None:
        ...

    async def drop(self, database: str) -> dict[str, Any]:
        ...

    async def drop_collection(self, database: str, collection: str) -> dict[str, Any]:
        ...

    async def ping(self) -> dict[str, Any]:
        ...

    def close(self) -> None:
        ...


class MotorDriver:
    """``MongoDriver`` backed by an ``AsyncIOMotorClient``."""

    def __init__(self, client: AsyncIOMotorClient):
        self.client = client

    async def list_databases(self) -> list[dict[str, Any]]:
        """List databases in server order."""
        cursor = await self.client.list_databases()
        return await cursor.to_list(length=None)

    async def stats_for(self, database: str) -> dict[str, Any]:
        """Run ``dbstats`` against a database."""
        return await self.client[database].command("dbstats")

    async def list_collections(self, database: str) -> list[dict[str, Any]]:
        """List collection info documents in server order."""
        cursor = await self.client[database].list_collections()
        return await cursor.to_list(length=None)

    async def find_documents(
        self, database: str, collection: str, limit: int = 0
    ) -> list[dict[str, Any]]:
        """Fetch raw documents of a collection (all of them when limit is 0)."""
        cursor = self.client[database][collection].find()
        if limit:
            cursor = cursor.limit(limit)
        return await cursor.to_list(length=None)

    async def create_bootstrap(self, database: str, collection: str) -> None:
        """
        Materialize a database.

        MongoDB creates databases lazily, so an empty placeholder
        collection is created to make the new database visible in listings.
        """
        await self.client[database].create_collection(collection)

    async def create_collection(self, database: str, collection: str) -> None:
        await self.client[database].create_collection(collection)

    async def drop(self, database: str) -> dict[str, Any]:
        """
        Drop a database and return ``{"dropped": name, "ok": ok}``.

        Servers from 4.2 on no longer echo the dropped name, in which case
        the requested name is reported.
        """
        reply = await self.client[database].command("dropDatabase")
        return {"dropped": reply.get("dropped", database), "ok": reply.get("ok", 0)}

    async def drop_collection(self, database: str, collection: str) -> dict[str, Any]:
        """
        Drop a collection and return ``{"dropped": name, "ok": ok}``.

        The name comes from the reply namespace; it is missing when the
        collection did not exist.
        """
        reply = await self.client[database].drop_collection(collection)
        ns = reply.get("ns")
        dropped = ns.split(".", 1)[1] if ns and "." in ns else None
        return {"dropped": dropped, "ok": reply.get("ok", 0)}

    async def ping(self) -> dict[str, Any]:
        return await self.client.admin.command("ping")

    def close(self) -> None:
        self.client.close()
