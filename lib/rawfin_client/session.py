from __future__ import annotations

import json
import logging
import threading
from typing import Any, Protocol

logger = logging.getLogger(__name__)

TOKEN_KEY = "rawfin_auth_token"
USER_KEY = "rawfin_user_data"


class SessionStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemorySessionStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class AuthSession:
    """Bearer token and user profile snapshot kept in a SessionStore.

    Every ``clear()`` bumps ``generation``. Writers that started before a
    logout pass the generation they observed and the write is dropped if
    it no longer matches.
    """

    def __init__(self, store: SessionStore | None = None):
        self._store = store if store is not None else MemorySessionStore()
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def token(self) -> str | None:
        value = self._store.get(TOKEN_KEY)
        return value or None

    def set_token(self, token: str | None, *, generation: int | None = None) -> bool:
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            if token:
                self._store.set(TOKEN_KEY, token)
            else:
                self._store.delete(TOKEN_KEY)
            return True

    def user(self) -> Any | None:
        raw = self._store.get(USER_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable user profile snapshot")
            return None

    def set_user(self, data: Any | None, *, generation: int | None = None) -> bool:
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            if data:
                self._store.set(USER_KEY, json.dumps(data, ensure_ascii=False))
            else:
                self._store.delete(USER_KEY)
            return True

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._store.delete(TOKEN_KEY)
            self._store.delete(USER_KEY)
