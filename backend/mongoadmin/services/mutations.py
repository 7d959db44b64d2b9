"""
Create and drop operations for databases and collections.
"""
import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from mongoadmin.database.driver import MongoDriver
from mongoadmin.models import CollectionEntity, DatabaseEntity
from mongoadmin.schemas.mutation import MutationOutcome, MutationResult
from mongoadmin.services.aggregator import AggregateResult, Aggregator

logger = logging.getLogger(__name__)


def evaluate_drop(name: str, ack: Any) -> MutationResult:
    """
    Compare a drop acknowledgment with the requested name.

    Success requires ``{"dropped": name, "ok": 1}``; anything else,
    including a missing field or a non-mapping reply, is a failure.
    """
    if isinstance(ack, Mapping) and ack.get("dropped") == name and ack.get("ok") == 1:
        return MutationResult(name=name, outcome=MutationOutcome.SUCCESS)
    return MutationResult(name=name, outcome=MutationOutcome.FAILED)


class MutationGateway:
    """Runs create/drop against the driver and reports per-entity outcomes."""

    def __init__(
        self,
        driver: MongoDriver,
        aggregator: Optional[Aggregator] = None,
        bootstrap_collection: str = "init",
    ):
        self.driver = driver
        self.aggregator = aggregator or Aggregator(driver)
        self.bootstrap_collection = bootstrap_collection

    # ==================== Databases ====================

    async def create(self, name: str) -> AggregateResult[Optional[DatabaseEntity]]:
        """
        Create a database and return it as the listing would show it.

        The database is materialized through a placeholder collection, then
        found again in a fresh listing. Its id counts every listed database
        plus one, so it never collides with ids of an earlier listing.
        """
        try:
            await self.driver.create_bootstrap(name, self.bootstrap_collection)
            listing = await self.driver.list_databases()
        except Exception as e:
            logger.error(f"Create database '{name}' failed: {e}")
            return AggregateResult(result=None, error=str(e))

        index = 0
        found = None
        for info in listing:
            index += 1
            if info.get("name") == name:
                found = info
        index += 1

        if found is None:
            logger.warning(f"Database '{name}' not visible in listing after create")
            found = {"name": name}

        database = await self.aggregator.build_database(found, index)
        logger.info(f"Created database '{name}'")
        return AggregateResult(result=database)

    async def drop(self, names: Iterable[str]) -> list[MutationResult]:
        """Drop databases one after the other, skipping empty names."""
        results = []
        for name in names:
            if not name:
                continue
            try:
                ack = await self.driver.drop(name)
            except Exception as e:
                logger.warning(f"Drop database '{name}' failed: {e}")
                ack = None
            results.append(evaluate_drop(name, ack))
        return results

    # ==================== Collections ====================

    async def create_collection(
        self, database: str, name: str
    ) -> AggregateResult[Optional[CollectionEntity]]:
        """Create a collection and return it at its position in the database."""
        try:
            await self.driver.create_collection(database, name)
        except Exception as e:
            logger.error(f"Create collection '{database}.{name}' failed: {e}")
            return AggregateResult(result=None, error=str(e))

        for collection in await self.aggregator.list_collections(database):
            if collection.name == name:
                logger.info(f"Created collection '{database}.{name}'")
                return AggregateResult(result=collection)

        logger.warning(f"Collection '{database}.{name}' not visible in listing after create")
        return AggregateResult(result=CollectionEntity(name=name))

    async def drop_collections(self, database: str, names: Iterable[str]) -> list[MutationResult]:
        """Drop collections of one database, skipping empty names."""
        results = []
        for name in names:
            if not name:
                continue
            try:
                ack = await self.driver.drop_collection(database, name)
            except Exception as e:
                logger.warning(f"Drop collection '{database}.{name}' failed: {e}")
                ack = None
            results.append(evaluate_drop(name, ack))
        return results
