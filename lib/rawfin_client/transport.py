from __future__ import annotations

import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, ResponseDecodeError

logger = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {"User-Agent": f"rawfin-client/{cfg.client_version or '0.1.0'}"}
        self._client = httpx.Client(
            base_url=cfg.base_url.rstrip("/"),
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(
            self,
            method: str,
            path: str,
            *,
            headers: httpx.Headers | dict[str, str],
            body: str | None = None,
    ) -> Any:
        try:
            r = self._client.request(method, path, headers=headers, content=body)
        except httpx.TimeoutException as e:
            logger.warning("API request timed out: %s %s (%s)", method, path, e)
            raise ApiError("Request timeout", 408, {}) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("API request failed: %s %s (%s)", method, path, e)
            raise

        if not r.is_success:
            try:
                data = r.json()
            except ValueError:
                data = {}
            logger.warning("API request failed: %s %s -> %s", method, path, r.status_code)
            raise ApiError(f"API Error: {r.status_code}", r.status_code, data)

        try:
            return r.json()
        except ValueError as e:
            logger.warning("API response is not JSON: %s %s -> %s", method, path, r.status_code)
            raise ResponseDecodeError(r.status_code, r.text[:1000]) from e
