"""
JSON response envelope shared by every endpoint.

Success: ``{"success": true, "data": {...}}``
Failure: ``{"success": false, "errors": {...}}``
"""
import json
from typing import Any

from bson import json_util
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mongoadmin.core.exceptions import AdminError, DriverUnavailableError


def encode(value: Any) -> Any:
    """
    Convert models and driver values into plain JSON data.

    Unset optional fields are left out. BSON values (ObjectId, datetime,
    Decimal128, ...) become relaxed extended JSON.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)
    elif isinstance(value, dict):
        return {k: encode(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [encode(v) for v in value]
    return json.loads(json_util.dumps(value, json_options=json_util.RELAXED_JSON_OPTIONS))


def success_response(data: dict[str, Any], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Wrap data in a success envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": encode(data)},
    )


def error_response(errors: dict[str, Any], status_code: int) -> JSONResponse:
    """Wrap errors in a failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "errors": jsonable_encoder(errors)},
    )


async def admin_error_handler(request: Request, exc: AdminError) -> JSONResponse:
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(exc, DriverUnavailableError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return error_response({"error": exc.message}, status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        errors[field or "body"] = error["msg"]
    return error_response(errors, status.HTTP_422_UNPROCESSABLE_ENTITY)
