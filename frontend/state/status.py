"""
Load status of a cached list or item.
"""
from enum import IntEnum


class LoadStatus(IntEnum):
    """Freshness of one store slot."""
    IDLE = 0
    LOADING = 1
    LOADED = 2
    FAILED = 3
