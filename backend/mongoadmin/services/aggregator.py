"""
Hierarchy aggregation: databases -> collections -> documents.

Walks the server hierarchy through a ``MongoDriver`` and assembles one
nested result. Failures are absorbed as close to their source as possible:
a database whose stats or collections cannot be read still appears in the
listing, only a failing database enumeration is reported as an error.
"""
import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from mongoadmin.database.driver import MongoDriver
from mongoadmin.models import CollectionEntity, DatabaseEntity
from mongoadmin.services.stats import fetch_stats

logger = logging.getLogger(__name__)

ALL_DATABASES = "all"

T = TypeVar("T")


@dataclass
class AggregateResult(Generic[T]):
    """
    Value plus top-level error of an aggregation call.

    An empty listing and a failed listing both carry an empty ``result``;
    only ``error`` tells them apart.
    """
    result: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Aggregator:
    """Builds database entities from driver calls."""

    def __init__(self, driver: MongoDriver, document_limit: int = 0):
        self.driver = driver
        self.document_limit = document_limit

    async def aggregate(
        self, scope: str = ALL_DATABASES
    ) -> Union[AggregateResult[list[DatabaseEntity]], AggregateResult[DatabaseEntity]]:
        """Aggregate every database (``"all"``) or the database named by scope."""
        if scope == ALL_DATABASES:
            return await self.aggregate_all()
        return await self.aggregate_one(scope)

    async def aggregate_all(self) -> AggregateResult[list[DatabaseEntity]]:
        """
        List every database with stats and a collection summary.

        Ids follow enumeration order starting at 0 and advance once per
        visited database whatever happened while reading it.
        """
        databases: list[DatabaseEntity] = []
        index = 0
        try:
            listing = await self.driver.list_databases()
        except Exception as e:
            logger.error(f"Database listing failed: {e}")
            return AggregateResult(result=[], error=str(e))

        for info in listing:
            databases.append(await self.build_database(info, index))
            index += 1

        logger.info(f"Aggregated {len(databases)} databases")
        return AggregateResult(result=databases)

    async def aggregate_one(self, name: str) -> AggregateResult[DatabaseEntity]:
        """Stats and collections with their documents for a single database."""
        stats = await fetch_stats(self.driver, name)
        collections = await self.list_collections(name, detail=True)
        return AggregateResult(
            result=DatabaseEntity(name=name, stats=stats, collections=collections)
        )

    async def build_database(self, info: dict, index: Optional[int]) -> DatabaseEntity:
        """Database entity in summary mode from a ``listDatabases`` entry."""
        name = info["name"]
        return DatabaseEntity(
            id=index,
            name=name,
            size_on_disk=info.get("sizeOnDisk"),
            empty=info.get("empty"),
            stats=await fetch_stats(self.driver, name),
            collections=await self.list_collections(name),
        )

    async def list_collections(self, database: str, detail: bool = False) -> list[CollectionEntity]:
        """
        Enumerate the collections of a database in server order.

        Summary mode returns metadata only. Detail mode also fetches the
        documents and their count. An enumeration failure yields an empty list.
        """
        listing = await self.collection_listing(database, detail)
        return listing.result

    async def collection_listing(
        self, database: str, detail: bool = False
    ) -> AggregateResult[list[CollectionEntity]]:
        """Collections of one database, with a failing enumeration reported as the error."""
        try:
            infos = await self.driver.list_collections(database)
        except Exception as e:
            logger.warning(f"Collections unavailable for database '{database}': {e}")
            return AggregateResult(result=[], error=str(e))

        collections = []
        for index, info in enumerate(infos):
            objects = await self.fetch_documents(database, info["name"]) if detail else None
            collections.append(CollectionEntity.from_info(index, info, objects))
        return AggregateResult(result=collections)

    async def collection_detail(self, database: str, name: str) -> AggregateResult[Optional[CollectionEntity]]:
        """One collection in detail mode, with its ordinal in the database."""
        try:
            infos = await self.driver.list_collections(database)
        except Exception as e:
            logger.error(f"Collection listing failed for database '{database}': {e}")
            return AggregateResult(result=None, error=str(e))

        for index, info in enumerate(infos):
            if info["name"] == name:
                objects = await self.fetch_documents(database, name)
                return AggregateResult(result=CollectionEntity.from_info(index, info, objects))

        return AggregateResult(result=None, error=f"Collection '{name}' not found in database '{database}'")

    async def fetch_documents(self, database: str, collection: str) -> list[dict]:
        try:
            return await self.driver.find_documents(database, collection, self.document_limit)
        except Exception as e:
            logger.warning(f"Documents unavailable for '{database}.{collection}': {e}")
            return []
