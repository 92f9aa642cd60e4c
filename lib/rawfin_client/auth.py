from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import quote

import httpx

from .errors import ApiError, RawfinClientError, SessionChangedError
from .results import Failure, Ok, Result

if TYPE_CHECKING:
    from .client import RawfinClient

logger = logging.getLogger(__name__)

# Failures that end an auth cascade: backend errors, raw httpx errors and bad URLs.
CASCADE_ERRORS = (RawfinClientError, httpx.HTTPError, httpx.InvalidURL)


@dataclass(frozen=True)
class AuthApi:
    """OAuth session lifecycle.

    ``get_profile`` and ``refresh_token`` return ``Ok``/``Failure`` instead
    of raising: a failed fetch logs the session out and hands the original
    error back in the ``Failure``.
    """

    client: RawfinClient

    def login_url(self, provider: str) -> str:
        return self.client.url_for(f"/auth/{quote(provider, safe='')}")

    def login(self, provider: str) -> None:
        self.client.browser.open(self.login_url(provider))

    def logout(self) -> Any | None:
        self.client.session.clear()
        try:
            return self.client.request("/auth/logout", method="POST")
        except CASCADE_ERRORS as e:
            logger.warning("Logout API error: %s", e)
            return None

    def get_profile(self) -> Result[Any]:
        generation = self.client.session.generation
        result = self._attempt(lambda: self.client.request("/auth/profile"))
        if isinstance(result, Failure):
            self._end_session(generation)
            return result
        if not self.client.session.set_user(result.value, generation=generation):
            logger.info("Discarding profile fetched for a session that was logged out")
            return Failure(SessionChangedError("session was logged out during profile fetch"))
        return result

    def refresh_token(self) -> Result[Any]:
        generation = self.client.session.generation
        result = self._attempt(lambda: self.client.request("/auth/refresh", method="POST"))
        if isinstance(result, Ok):
            token = result.value.get("token") if isinstance(result.value, dict) else None
            if not isinstance(token, str) or not token:
                result = Failure(ApiError("auth refresh returned no token", 500, {}))
        if isinstance(result, Failure):
            self._end_session(generation)
            return result
        if not self.client.session.set_token(token, generation=generation):
            logger.info("Discarding refreshed token for a session that was logged out")
            return Failure(SessionChangedError("session was logged out during token refresh"))
        return result

    def is_authenticated(self) -> bool:
        return bool(self.client.session.token())

    def current_user(self) -> Any | None:
        return self.client.session.user()

    def _end_session(self, generation: int) -> None:
        # a newer session started while the request was in flight is left alone
        if self.client.session.generation != generation:
            logger.info("Skipping logout for a session that was replaced during the request")
            return
        self.logout()

    @staticmethod
    def _attempt(call: Callable[[], Any]) -> Result[Any]:
        try:
            return Ok(call())
        except CASCADE_ERRORS as e:
            return Failure(e)
