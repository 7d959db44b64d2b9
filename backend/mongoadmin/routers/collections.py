"""
Collections router: the databases contract one level down.
"""
from fastapi import APIRouter, Depends, Query, status

from mongoadmin.core.responses import error_response, success_response
from mongoadmin.dependencies.services import get_aggregator, get_gateway
from mongoadmin.schemas.mutation import CollectionCreate, CollectionDelete
from mongoadmin.services.aggregator import Aggregator
from mongoadmin.services.mutations import MutationGateway

router = APIRouter(prefix="/collections", tags=["Collections"])


@router.get(
    "",
    summary="List collections",
)
async def list_collections(
    database: str = Query(..., min_length=1, description="Owning database"),
    aggregator: Aggregator = Depends(get_aggregator),
):
    """
    List the collections of a database without their documents.

    If the collections cannot be enumerated, the call fails.
    """
    aggregated = await aggregator.collection_listing(database)

    if not aggregated.ok:
        return error_response(
            {"error": aggregated.error},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return success_response({"collections": aggregated.result})


@router.post(
    "/create",
    summary="Create collection",
)
async def create_collection(
    body: CollectionCreate,
    gateway: MutationGateway = Depends(get_gateway),
):
    """
    Create a collection.

    - **database**: Owning database (created if missing)
    - **collection**: Collection name
    """
    created = await gateway.create_collection(body.database, body.collection)

    if not created.ok:
        return error_response(
            {"error": created.error},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return success_response({"collection": created.result})


@router.post(
    "/delete",
    summary="Drop collections",
)
async def delete_collections(
    body: CollectionDelete,
    gateway: MutationGateway = Depends(get_gateway),
):
    """Drop the named collections of a database, one result per non-empty name."""
    results = await gateway.drop_collections(body.database, body.names)
    return success_response({"status": results})


@router.get(
    "/{name}",
    summary="Get collection with documents",
)
async def get_collection(
    name: str,
    database: str = Query(..., min_length=1, description="Owning database"),
    aggregator: Aggregator = Depends(get_aggregator),
):
    """Get one collection with its documents and count."""
    aggregated = await aggregator.collection_detail(database, name)

    if not aggregated.ok:
        return error_response(
            {"error": aggregated.error},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return success_response({"collection": aggregated.result})
