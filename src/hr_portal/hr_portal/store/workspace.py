from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..employees.model import Employee
from ..session.service import AuthResult, SessionState
from .entity_store import EntityStore

logger = logging.getLogger(__name__)


class Workspace:
    """Binds one entity store to the lifetime of the signed-in session.

    The store is built and loaded on first use after a session starts
    (fresh login or identity rehydrated from storage) and dropped on
    logout, so the next user never sees the previous user's cache.
    """

    def __init__(self, session: SessionState, store_factory: Callable[[], EntityStore]):
        self.session = session
        self._store_factory = store_factory
        self._store: Optional[EntityStore] = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._store is not None

    def actor(self) -> Employee:
        return self.session.require_user()

    @property
    def store(self) -> EntityStore:
        self.session.require_user()
        with self._lock:
            if self._store is None:
                self._store = self._open()
            return self._store

    def _open(self) -> EntityStore:
        store = self._store_factory()
        store.load()
        return store

    def login(self, email: str, password: str) -> AuthResult:
        result = self.session.login(email, password)
        if result:
            with self._lock:
                self._store = self._open()
        return result

    def logout(self) -> None:
        self.session.logout()
        with self._lock:
            self._store = None
        logger.info("Session closed, entity store released")

    def reload(self) -> EntityStore:
        """Re-run the initial load on the current store (manual retry)."""

        store = self.store
        store.load()
        return store
