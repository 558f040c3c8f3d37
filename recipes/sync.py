"""
Live-query synchronisation.

A SyncAdapter turns one live query at a time into a held list of normalized
records plus loading/error status. Every view state holder composes one
adapter per live list it shows.

Firestore delivers snapshots on a background watch thread. Each subscription
gets a generation number; callbacks from an older generation (a released or
replaced subscription) are dropped, so no callback mutates state after
`unsubscribe()`, `subscribe()` with a new key, or `close()` returns.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


@dataclass(frozen=True)
class QueryKey:
    """Names a live query and the parameter it is scoped to."""

    name: str
    param: Optional[str] = None
    requires_identity: bool = False

    APPROVED_RECIPES = "approved_recipes"
    COMMENTS = "comments"
    RECIPE_FAVOURITES = "recipe_favourites"
    USER_FAVOURITES = "user_favourites"

    @classmethod
    def approved_recipes(cls) -> "QueryKey":
        return cls(cls.APPROVED_RECIPES)

    @classmethod
    def comments(cls, recipe_id: str) -> "QueryKey":
        return cls(cls.COMMENTS, recipe_id)

    @classmethod
    def recipe_favourites(cls, recipe_id: str) -> "QueryKey":
        return cls(cls.RECIPE_FAVOURITES, recipe_id)

    @classmethod
    def user_favourites(cls, uid: Optional[str]) -> "QueryKey":
        return cls(cls.USER_FAVOURITES, uid, requires_identity=True)

    @property
    def missing_identity(self) -> bool:
        return self.requires_identity and not self.param


@dataclass(frozen=True)
class SyncState:
    """What a view renders: the latest good list, a loading flag and an error message."""

    data: Tuple[Record, ...] = field(default_factory=tuple)
    loading: bool = False
    error: Optional[str] = None


class SyncAdapter:
    """Hold the result of one live query and keep it current."""

    def __init__(self, queries):
        self._queries = queries
        self._lock = threading.RLock()
        self._key: Optional[QueryKey] = None
        self._handle = None
        self._generation = 0
        self._closed = False
        self._state = SyncState()
        self._observers: List[Callable[[SyncState], None]] = []

    @property
    def key(self) -> Optional[QueryKey]:
        return self._key

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def data(self) -> List[Record]:
        return list(self._state.data)

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def closed(self) -> bool:
        return self._closed

    def add_observer(self, callback: Callable[[SyncState], None]) -> Callable[[], None]:
        """Call `callback(state)` after every state change; returns a remover."""
        with self._lock:
            self._observers.append(callback)

        def remove():
            with self._lock:
                if callback in self._observers:
                    self._observers.remove(callback)

        return remove

    def subscribe(self, key: QueryKey) -> None:
        """Point the adapter at `key`, releasing the previous subscription first."""
        with self._lock:
            if self._closed:
                logger.debug("Ignoring subscribe(%s) on a closed adapter", key)
                return
            if key == self._key:
                return
            previous, released = self._key, self._detach()
            self._key = key
            generation = self._generation

            if key.missing_identity:
                # No identity, no network access.
                self._set_state(SyncState(data=(), loading=False, error=None))
            else:
                self._set_state(SyncState(data=(), loading=True, error=None))
                self._listen(key, generation)
        self._unsubscribe(released, previous)

    def _listen(self, key, generation):
        try:
            live_query = self._queries.resolve(key)
            self._handle = live_query.listen(
                on_records=lambda records: self._on_records(generation, records),
                on_error=lambda error: self._on_error(generation, error),
            )
        except Exception as e:
            logger.error("Could not subscribe to %s: %s", key, e)
            self._on_error(generation, e)

    def unsubscribe(self) -> None:
        """Release the current subscription; held data is kept."""
        with self._lock:
            key, released = self._key, self._detach()
            self._key = None
        self._unsubscribe(released, key)

    def close(self) -> None:
        """Release the subscription for good; later callbacks are dropped."""
        with self._lock:
            key, released = self._key, self._detach()
            self._key = None
            self._closed = True
            self._observers.clear()
        self._unsubscribe(released, key)

    def _detach(self):
        """Invalidate in-flight callbacks and hand back the handle to release."""
        self._generation += 1
        handle, self._handle = self._handle, None
        return handle

    def _unsubscribe(self, handle, key):
        # Called without the lock: closing a Firestore watch joins its callback thread.
        if handle is None:
            return
        try:
            handle.unsubscribe()
        except Exception as e:
            logger.warning("Failed to release subscription to %s: %s", key, e)

    def _is_current(self, generation) -> bool:
        return not self._closed and generation == self._generation

    def _on_records(self, generation, records):
        with self._lock:
            if not self._is_current(generation):
                logger.debug("Dropping snapshot from a released subscription")
                return
            self._set_state(SyncState(data=tuple(records), loading=False, error=None))

    def _on_error(self, generation, error):
        with self._lock:
            if not self._is_current(generation):
                return
            logger.warning("Live query %s failed: %s", self._key, error)
            message = getattr(error, "message", None) or str(error) or "Could not load data"
            self._set_state(SyncState(data=self._state.data, loading=False, error=message))

    def _set_state(self, state: SyncState):
        self._state = state
        for observer in list(self._observers):
            observer(state)
