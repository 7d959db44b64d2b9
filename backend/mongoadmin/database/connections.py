"""
Per-request MongoDB connection management.

Each request gets its own client, closed when the request ends. Nothing is
pooled or shared between requests.
"""
import logging
from typing import AsyncIterator, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from mongoadmin.config import Settings, get_settings
from mongoadmin.core.exceptions import DriverUnavailableError
from mongoadmin.database.driver import MotorDriver

logger = logging.getLogger(__name__)


def open_driver(settings: Optional[Settings] = None) -> MotorDriver:
    """Open a fresh MongoDB connection wrapped in a ``MotorDriver``."""
    settings = settings or get_settings()
    if not settings.mongo_uri:
        raise DriverUnavailableError("No MongoDB server is configured")
    client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
    )
    return MotorDriver(client)


async def get_driver() -> AsyncIterator[MotorDriver]:
    """FastAPI dependency yielding a driver scoped to the request."""
    driver = open_driver()
    try:
        yield driver
    finally:
        driver.close()
        logger.debug("MongoDB connection closed")
