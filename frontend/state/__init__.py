"""
Per-entity-type client stores.

Stores live in the session mapping handed to ``get_stores`` and are passed
to views explicitly.
"""
from typing import MutableMapping

from .status import LoadStatus
from .store import CREATED, DROPPED, NO_RESULTS, CollectionStore, DatabaseStore, EntityStore

STORES_KEY = "stores"


def get_stores(session_state: MutableMapping, api) -> tuple[DatabaseStore, CollectionStore]:
    """Return the session's database and collection stores, creating them once."""
    if STORES_KEY not in session_state:
        collections = CollectionStore(api)
        session_state[STORES_KEY] = {
            "database": DatabaseStore(api, collections=collections),
            "collection": collections,
        }
    stores = session_state[STORES_KEY]
    return stores["database"], stores["collection"]


__all__ = [
    "LoadStatus",
    "NO_RESULTS",
    "CREATED",
    "DROPPED",
    "EntityStore",
    "DatabaseStore",
    "CollectionStore",
    "get_stores",
]
