"""
Client-side stores for databases and collections.

One store per entity type keeps the last fetched list, the single item
being viewed and the last error, each list/item/create/delete slot with its
own ``LoadStatus``. Views only read the derived properties.

Every request takes a sequence number for its slot; a response that is not
the latest one issued for the slot is dropped so a slow response never
overwrites a newer one.
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional

from .status import LoadStatus

logger = logging.getLogger(__name__)

NO_RESULTS = "no-results-found"
CREATED = "entity-created"
DROPPED = "entity-dropped"

SLOTS = ("list", "item", "create", "delete")

Listener = Callable[[str, dict], None]


class EntityStore(ABC):
    """
    Load/create/delete lifecycle of one entity type.

    Subclasses provide the four request methods ``_fetch_list``,
    ``_fetch_item``, ``_create`` and ``_delete``, each returning an
    ``APIClient`` response dict.
    """

    label = "entity"
    list_key = "items"
    item_key = "item"

    def __init__(self, api):
        self.api = api
        self.items: list[dict] = []
        self.item: dict = {}
        self.active_name: Optional[str] = None
        self.last_error: Optional[dict] = None
        self._status = {slot: LoadStatus.IDLE for slot in SLOTS}
        self._sequence = {slot: 0 for slot in SLOTS}
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    # ==================== Status ====================

    def status(self, slot: str) -> LoadStatus:
        return self._status[slot]

    @property
    def list_status(self) -> LoadStatus:
        return self._status["list"]

    @property
    def item_status(self) -> LoadStatus:
        return self._status["item"]

    @property
    def create_status(self) -> LoadStatus:
        return self._status["create"]

    @property
    def delete_status(self) -> LoadStatus:
        return self._status["delete"]

    def _begin(self, slot: str) -> int:
        with self._lock:
            self._sequence[slot] += 1
            self._status[slot] = LoadStatus.LOADING
            return self._sequence[slot]

    def _is_current(self, slot: str, seq: int) -> bool:
        return self._sequence[slot] == seq

    # ==================== Notifications ====================

    def subscribe(self, listener: Listener) -> None:
        """Register a callback receiving ``(event, payload)``."""
        self._listeners.append(listener)

    def _emit(self, event: str, payload: dict) -> None:
        for listener in list(self._listeners):
            listener(event, payload)

    # ==================== Derived views ====================

    @property
    def active(self) -> Optional[dict]:
        """The loaded item, or None while it is loading or failed."""
        if self.item_status != LoadStatus.LOADED or not self.item:
            return None
        return self.item

    def display_item(self, entity_id: Any) -> Optional[dict]:
        """Loaded item if there is one, else the list entry with that id."""
        if self.active is not None:
            return self.active
        return next((e for e in self.items if e.get("id") == entity_id), None)

    def find(self, name: str) -> Optional[dict]:
        return next((e for e in self.items if e.get("name") == name), None)

    @property
    def names(self) -> list[str]:
        return [e.get("name") for e in self.items]

    # ==================== Responses ====================

    @staticmethod
    def _unwrap(response: dict) -> tuple[bool, dict, dict]:
        """Split an API client response into ``(ok, data, errors)``."""
        body = response.get("data")
        http_status = response.get("status", 0)
        if isinstance(body, dict) and 200 <= http_status < 300 and body.get("success") is True:
            return True, body.get("data") or {}, {}
        if isinstance(body, dict) and body.get("errors"):
            return False, {}, body["errors"]
        error = response.get("error") or f"Request failed with status {http_status}"
        return False, {}, {"error": error}

    def _fail(self, slot: str, errors: dict) -> None:
        self._status[slot] = LoadStatus.FAILED
        self.last_error = errors
        logger.warning(f"{self.label} {slot} request failed: {errors}")

    # ==================== Requests ====================

    @abstractmethod
    def _fetch_list(self) -> dict:
        ...

    @abstractmethod
    def _fetch_item(self, name: str) -> dict:
        ...

    @abstractmethod
    def _create(self, name: str) -> dict:
        ...

    @abstractmethod
    def _delete(self, names: list[str]) -> dict:
        ...

    def _on_item_loaded(self, item: dict) -> None:
        pass

    def _event_payload(self) -> dict:
        return {}

    # ==================== Actions ====================

    def load_list(self) -> bool:
        """Fetch the list. Returns False when the response was superseded."""
        seq = self._begin("list")
        ok, data, errors = self._unwrap(self._fetch_list())

        with self._lock:
            if not self._is_current("list", seq):
                logger.debug(f"Dropping stale {self.label} list response #{seq}")
                return False
            if ok:
                self.items = list(data.get(self.list_key) or [])
                self._status["list"] = LoadStatus.LOADED
                return True
            self.items = []
            self._fail("list", errors)

        self._emit(NO_RESULTS, {
            "notification": f"No {self.label}s were returned from the api - please try again later",
        })
        return True

    def load_item(self, name: str) -> bool:
        """
        Fetch one entity by name.

        The previous item is cleared and ``active_name`` set before the
        request goes out, so nothing stale is shown while loading.
        """
        seq = self._begin("item")
        with self._lock:
            self.item = {}
            self.active_name = name

        ok, data, errors = self._unwrap(self._fetch_item(name))

        with self._lock:
            if not self._is_current("item", seq):
                logger.debug(f"Dropping stale {self.label} '{name}' response #{seq}")
                return False
            if ok:
                self.item = data.get(self.item_key) or {}
                self._status["item"] = LoadStatus.LOADED
                self._on_item_loaded(self.item)
                return True
            self.item = {}
            self._fail("item", errors)

        self._emit(NO_RESULTS, {
            "notification": f"No {self.label} was returned from the api - please try again later",
        })
        return True

    def create(self, name: str) -> Optional[dict]:
        """Create an entity and append it to the end of the list."""
        seq = self._begin("create")
        ok, data, errors = self._unwrap(self._create(name))

        with self._lock:
            current = self._is_current("create", seq)
            if not ok:
                if current:
                    self._fail("create", errors)
                return None
            entity = data.get(self.item_key)
            if entity:
                self.items.append(entity)
            if current:
                self._status["create"] = LoadStatus.LOADED

        if entity:
            self._emit(CREATED, {**self._event_payload(), "entity": entity})
        return entity

    def delete(self, names: Iterable[str]) -> list[dict]:
        """
        Drop entities and remove those reported as dropped.

        Only names whose own result is ``success`` leave the list; the
        rest stay until the next full load. A dropped item that is loaded
        is cleared and its slot goes back to IDLE.
        """
        seq = self._begin("delete")
        ok, data, errors = self._unwrap(self._delete(list(names)))

        with self._lock:
            current = self._is_current("delete", seq)
            if not ok:
                if current:
                    self._fail("delete", errors)
                return []
            results = data.get("status") or []
            dropped = {
                name
                for result in results
                for name, outcome in result.items()
                if outcome == "success"
            }
            self.items = [e for e in self.items if e.get("name") not in dropped]
            if self.active_name in dropped:
                # Supersede any item request still in flight
                self._sequence["item"] += 1
                self._status["item"] = LoadStatus.IDLE
                self.item = {}
                self.active_name = None
            if current:
                self._status["delete"] = LoadStatus.LOADED

        if dropped:
            self._emit(DROPPED, {**self._event_payload(), "names": sorted(dropped)})
        return results


class CollectionStore(EntityStore):
    """Collections of the selected database."""

    label = "collection"
    list_key = "collections"
    item_key = "collection"

    FORMATS = ("json", "array")

    def __init__(self, api):
        super().__init__(api)
        self.database: Optional[str] = None
        self.current_format = "json"

    def set_format(self, fmt: str) -> None:
        """Document display format, independent of any load status."""
        if fmt not in self.FORMATS:
            raise ValueError(f"Unknown format '{fmt}', expected one of {self.FORMATS}")
        self.current_format = fmt

    def select_database(self, database: str) -> None:
        with self._lock:
            if database != self.database:
                self.items = []
                self.item = {}
                self.active_name = None
            self.database = database

    def replace_items(self, collections: list[dict], database: Optional[str] = None) -> None:
        """Take a collection list that arrived with a database."""
        with self._lock:
            self._sequence["list"] += 1
            if database is not None:
                self.database = database
            self.items = list(collections)
            self._status["list"] = LoadStatus.LOADED

    def _event_payload(self) -> dict:
        return {"database": self.database}

    def _no_database(self) -> dict:
        return {"status": 0, "error": "No database selected"}

    def _fetch_list(self) -> dict:
        if not self.database:
            return self._no_database()
        return self.api.get_collections(self.database)

    def _fetch_item(self, name: str) -> dict:
        if not self.database:
            return self._no_database()
        return self.api.get_collection(self.database, name)

    def _create(self, name: str) -> dict:
        if not self.database:
            return self._no_database()
        return self.api.create_collection(self.database, name)

    def _delete(self, names: list[str]) -> dict:
        if not self.database:
            return self._no_database()
        return self.api.delete_collections(self.database, names)


class DatabaseStore(EntityStore):
    """Databases of the server, optionally feeding a CollectionStore."""

    label = "database"
    list_key = "databases"
    item_key = "database"

    def __init__(self, api, collections: Optional[CollectionStore] = None):
        super().__init__(api)
        self.collections = collections
        if collections is not None:
            collections.subscribe(self._on_collection_event)

    @property
    def stats(self) -> dict:
        """Stats of the loaded database."""
        active = self.active
        return (active.get("stats") or {}) if active else {}

    def _fetch_list(self) -> dict:
        return self.api.get_databases()

    def _fetch_item(self, name: str) -> dict:
        return self.api.get_database(name)

    def _create(self, name: str) -> dict:
        return self.api.create_database(name)

    def _delete(self, names: list[str]) -> dict:
        return self.api.delete_databases(names)

    def _on_item_loaded(self, item: dict) -> None:
        if self.collections is not None:
            self.collections.replace_items(item.get("collections") or [], database=item.get("name"))

    def _on_collection_event(self, event: str, payload: dict) -> None:
        """Keep the loaded database's collections in step with collection mutations."""
        with self._lock:
            if not self.item or payload.get("database") != self.item.get("name"):
                return
            collections = list(self.item.get("collections") or [])
            if event == CREATED:
                collections.append(payload["entity"])
            elif event == DROPPED:
                dropped = set(payload["names"])
                collections = [c for c in collections if c.get("name") not in dropped]
            else:
                return
            self.item = {**self.item, "collections": collections}
