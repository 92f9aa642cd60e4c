from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

if TYPE_CHECKING:
    from .client import RawfinClient


@dataclass(frozen=True)
class SearchApi:
    client: RawfinClient

    def search(self, query: str, filters: dict[str, Any] | None = None) -> Any:
        # filter keys go to the backend untouched; list values repeat the key
        params = {"q": query, **(filters or {})}
        return self.client.request_with_retry(f"/search?{urlencode(params, doseq=True)}")

    def suggestions(self, query: str) -> Any:
        return self.client.request_with_retry(f"/search/suggestions?{urlencode({'q': query})}")
