"""
Databases router: listing, single database view, create and drop.
"""
from fastapi import APIRouter, Depends, status

from mongoadmin.core.responses import error_response, success_response
from mongoadmin.dependencies.services import get_aggregator, get_gateway
from mongoadmin.schemas.mutation import DatabaseCreate, DatabaseDelete
from mongoadmin.services.aggregator import Aggregator
from mongoadmin.services.mutations import MutationGateway

router = APIRouter(prefix="/databases", tags=["Databases"])


@router.get(
    "",
    summary="List databases",
)
async def list_databases(aggregator: Aggregator = Depends(get_aggregator)):
    """
    List every database with its stats and a summary of its collections.

    A database whose stats cannot be read is listed with empty stats.
    If the server cannot be listed at all, the call fails.
    """
    aggregated = await aggregator.aggregate_all()

    if not aggregated.ok:
        return error_response(
            {"error": aggregated.error},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return success_response({"databases": aggregated.result})


@router.post(
    "/create",
    summary="Create database",
)
async def create_database(
    body: DatabaseCreate,
    gateway: MutationGateway = Depends(get_gateway),
):
    """
    Create a new database.

    - **database**: Name of the database to create
    """
    created = await gateway.create(body.database)

    if not created.ok:
        return error_response(
            {"error": created.error},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return success_response({"database": created.result})


@router.post(
    "/delete",
    summary="Drop databases",
)
async def delete_databases(
    body: DatabaseDelete,
    gateway: MutationGateway = Depends(get_gateway),
):
    """
    Drop the named databases, one result per non-empty name.

    **Warning**: This action cannot be undone.
    """
    results = await gateway.drop(body.names)
    return success_response({"status": results})


@router.get(
    "/{name}",
    summary="Get database with documents",
)
async def get_database(
    name: str,
    aggregator: Aggregator = Depends(get_aggregator),
):
    """Get one database with stats, collections, their documents and counts."""
    aggregated = await aggregator.aggregate_one(name)
    return success_response({"database": aggregated.result})
