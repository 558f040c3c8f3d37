"""Shared plumbing for per-screen view state holders."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from recipes.exceptions import CookifyError
from recipes.live_queries import LiveQueries
from recipes.sync import SyncAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """A short user-visible message, shown once."""

    kind: str
    message: str


class ScreenState:
    """
    Base for view state holders.

    Owns the screen's sync adapters and notices, converts service errors into
    notices at the call site, and ignores results that arrive after close().
    """

    def __init__(self, session, db, queries=None):
        self.session = session
        self.db = db
        self.queries = queries or LiveQueries(db)
        self.notices: List[Notice] = []
        self._adapters: List[SyncAdapter] = []
        self._cleanups: List[Callable[[], None]] = []
        self._observers: List[Callable[["ScreenState"], None]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def add_observer(self, callback):
        """Call `callback(self)` whenever the screen's state changes."""
        self._observers.append(callback)

    def changed(self):
        if self._closed:
            return
        for observer in list(self._observers):
            observer(self)

    def notify(self, kind: str, message: str):
        if self._closed:
            return
        self.notices.append(Notice(kind, message))
        self.changed()

    @property
    def last_notice(self) -> Optional[Notice]:
        return self.notices[-1] if self.notices else None

    def sync_adapter(self) -> SyncAdapter:
        """Create an adapter that is released with the screen."""
        adapter = SyncAdapter(self.queries)
        adapter.add_observer(lambda state: self._on_sync(adapter, state))
        self._adapters.append(adapter)
        return adapter

    def _on_sync(self, adapter, state):
        if state.error:
            self.notify("remote", state.error)
        else:
            self.changed()

    def on_close(self, cleanup: Callable[[], None]):
        self._cleanups.append(cleanup)

    def attempt(self, action, *args, **kwargs):
        """
        Run a service call and return (ok, result).

        CookifyErrors become notices. A result that arrives after close() is
        reported as not ok so callers leave freed state alone.
        """
        try:
            result = action(*args, **kwargs)
        except CookifyError as e:
            logger.info("%s failed: %s", getattr(action, "__name__", action), e.message)
            self.notify(e.kind, e.message)
            return False, None
        if self._closed:
            return False, None
        return True, result

    def close(self):
        """Tear down: release every subscription and listener."""
        if self._closed:
            return
        self._closed = True
        for adapter in self._adapters:
            adapter.close()
        for cleanup in self._cleanups:
            cleanup()
        self._cleanups.clear()
        self._observers.clear()
