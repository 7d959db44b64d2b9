"""
Database statistics fetching.
"""
import logging
from typing import Any

from mongoadmin.database.driver import MongoDriver

logger = logging.getLogger(__name__)


async def fetch_stats(driver: MongoDriver, database: str) -> dict[str, Any]:
    """
    Get ``dbstats`` for one database as a plain mapping.

    A single attempt is made. Any driver error (unreachable server,
    permission denied on that database, ...) yields an empty mapping so a
    listing of many databases keeps going.
    """
    try:
        stats = await driver.stats_for(database)
        return {key: value for key, value in stats.items()}
    except Exception as e:
        logger.warning(f"Stats unavailable for database '{database}': {e}")
        return {}
