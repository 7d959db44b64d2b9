"""
API Routers module.
"""
from mongoadmin.routers import collections, databases, health

__all__ = ["collections", "databases", "health"]
