"""
Service dependencies built on the per-request driver.
"""
from fastapi import Depends

from mongoadmin.config import get_settings
from mongoadmin.database.connections import get_driver
from mongoadmin.database.driver import MongoDriver
from mongoadmin.services.aggregator import Aggregator
from mongoadmin.services.mutations import MutationGateway


async def get_aggregator(driver: MongoDriver = Depends(get_driver)) -> Aggregator:
    """Dependency to get an Aggregator bound to the request's driver."""
    settings = get_settings()
    return Aggregator(driver, document_limit=settings.document_fetch_limit)


async def get_gateway(
    driver: MongoDriver = Depends(get_driver),
    aggregator: Aggregator = Depends(get_aggregator),
) -> MutationGateway:
    """Dependency to get a MutationGateway sharing the request's driver."""
    settings = get_settings()
    return MutationGateway(
        driver,
        aggregator=aggregator,
        bootstrap_collection=settings.bootstrap_collection,
    )
