from __future__ import annotations

from typing import Callable

import httpx
import pytest

from rawfin_client import RawfinClient
from rawfin_client.config_types import ClientConfig
from rawfin_client.session import AuthSession, MemorySessionStore


class RecordingBrowser:
    def __init__(self) -> None:
        self.opened: list[tuple[str, bool]] = []

    def open(self, url: str, *, new_tab: bool = False) -> None:
        self.opened.append((url, new_tab))


@pytest.fixture
def make_api():
    created: list[RawfinClient] = []

    def _make(
            handler: Callable[[httpx.Request], httpx.Response],
            *,
            base_url: str = "https://x/api",
            token: str | None = None,
            max_retries: int = 3,
            beacon=None,
    ) -> RawfinClient:
        sleeps: list[float] = []
        session = AuthSession(MemorySessionStore())
        if token:
            session.set_token(token)
        client = RawfinClient(
            ClientConfig(base_url=base_url, timeout_s=1.0, max_retries=max_retries, retry_delay_s=1.0),
            session=session,
            browser=RecordingBrowser(),
            beacon=beacon,
            http_transport=httpx.MockTransport(handler),
            sleep=sleeps.append,
        )
        client.sleeps = sleeps  # type: ignore[attr-defined]
        created.append(client)
        return client

    yield _make
    for client in created:
        client.close()
