from __future__ import annotations

import logging
import threading
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


class Beacon(Protocol):
    def send(self, url: str, payload: dict[str, Any]) -> bool: ...


class ThreadedBeacon:
    """Fire-and-forget POST on a daemon thread.

    ``send`` only reports whether the payload was queued; delivery errors
    are logged and dropped.
    """

    def __init__(self, *, timeout_s: float = 5.0, http_transport: httpx.BaseTransport | None = None):
        self._timeout_s = timeout_s
        self._http_transport = http_transport
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    def send(self, url: str, payload: dict[str, Any]) -> bool:
        thread = threading.Thread(target=self._deliver, args=(url, payload), daemon=True)
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()
        return True

    def _deliver(self, url: str, payload: dict[str, Any]) -> None:
        try:
            with httpx.Client(timeout=self._timeout_s, transport=self._http_transport) as client:
                r = client.post(url, json=payload)
            if not r.is_success:
                logger.debug("Beacon to %s rejected with %s", url, r.status_code)
        except httpx.HTTPError as e:
            logger.debug("Beacon to %s failed: %s", url, e)

    def close(self, timeout_s: float = 2.0) -> None:
        with self._lock:
            threads = list(self._threads)
            self._threads = []
        for thread in threads:
            thread.join(timeout_s)
