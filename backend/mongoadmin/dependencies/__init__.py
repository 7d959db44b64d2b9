"""
Dependencies for dependency injection in routes.
"""
from mongoadmin.dependencies.services import get_aggregator, get_gateway

__all__ = [
    "get_aggregator",
    "get_gateway",
]
