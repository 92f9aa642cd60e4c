from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx

from .analytics import AnalyticsApi
from .auth import AuthApi
from .beacon import Beacon
from .browser import Browser, SystemBrowser
from .config_types import ClientConfig
from .contact import ContactApi
from .episodes import EpisodesApi
from .errors import ApiError
from .newsletter import NewsletterApi
from .search import SearchApi
from .session import AuthSession
from .telegram import TelegramApi
from .transport import Transport

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


@dataclass
class RequestDescriptor:
    method: str
    endpoint: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: str | None = None


class RawfinClient:
    """JSON client for the Rawfin backend.

    Sub-clients (``newsletter``, ``search``, ``episodes``, ``contact``,
    ``auth``, ``telegram``, ``analytics``) only hold a reference to this
    object and delegate to ``request`` / ``request_with_retry``.
    """

    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            session: AuthSession | None = None,
            browser: Browser | None = None,
            beacon: Beacon | None = None,
            http_transport: httpx.BaseTransport | None = None,
            sleep: Callable[[float], None] = time.sleep,
    ):
        self.cfg = cfg or ClientConfig()
        self.session = session if session is not None else AuthSession()
        self.browser = browser if browser is not None else SystemBrowser()
        self.beacon = beacon
        self._sleep = sleep
        self._t = Transport(self.cfg, http_transport=http_transport)

        self.newsletter = NewsletterApi(self)
        self.search = SearchApi(self)
        self.episodes = EpisodesApi(self)
        self.contact = ContactApi(self)
        self.auth = AuthApi(self)
        self.telegram = TelegramApi(self)
        self.analytics = AnalyticsApi(self)

    @property
    def base_url(self) -> str:
        return self.cfg.base_url.rstrip("/")

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def close(self) -> None:
        self._t.close()
        close_beacon = getattr(self.beacon, "close", None)
        if close_beacon is not None:
            close_beacon()

    def __enter__(self) -> RawfinClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_request(
            self,
            endpoint: str,
            *,
            method: str = "GET",
            headers: dict[str, str] | None = None,
            json_body: Any | None = None,
    ) -> RequestDescriptor:
        merged = httpx.Headers(DEFAULT_HEADERS)
        merged.update(headers or {})
        token = self.session.token()
        if token:
            merged["Authorization"] = f"Bearer {token}"
        body = json.dumps(json_body) if json_body is not None else None
        return RequestDescriptor(method=method.upper(), endpoint=endpoint, headers=merged, body=body)

    def request(
            self,
            endpoint: str,
            *,
            method: str = "GET",
            headers: dict[str, str] | None = None,
            json_body: Any | None = None,
    ) -> Any:
        req = self.build_request(endpoint, method=method, headers=headers, json_body=json_body)
        return self._t.request(req.method, req.endpoint, headers=req.headers, body=req.body)

    def request_with_retry(
            self,
            endpoint: str,
            *,
            method: str = "GET",
            headers: dict[str, str] | None = None,
            json_body: Any | None = None,
    ) -> Any:
        attempt = 1
        while True:
            try:
                return self.request(endpoint, method=method, headers=headers, json_body=json_body)
            except ApiError as e:
                if attempt >= self.cfg.max_retries or not self.should_retry(e):
                    raise
                delay = self.cfg.retry_delay_s * attempt
                attempt += 1
                logger.info("Retrying %s %s (attempt %d) in %.1fs", method, endpoint, attempt, delay)
                self._sleep(delay)

    @staticmethod
    def should_retry(error: BaseException) -> bool:
        if isinstance(error, ApiError):
            return error.status >= 500 or error.status == 429
        return False
