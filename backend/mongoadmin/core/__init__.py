"""
Core module - Errors and the JSON response envelope.
"""
from mongoadmin.core.exceptions import AdminError, DriverUnavailableError
from mongoadmin.core.responses import (
    encode,
    success_response,
    error_response,
    admin_error_handler,
    validation_error_handler,
)

__all__ = [
    "AdminError",
    "DriverUnavailableError",
    "encode",
    "success_response",
    "error_response",
    "admin_error_handler",
    "validation_error_handler",
]
