from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

if TYPE_CHECKING:
    from .client import RawfinClient


@dataclass(frozen=True)
class EpisodesApi:
    client: RawfinClient

    def recent(self, limit: int = 6) -> Any:
        return self.client.request_with_retry(f"/episodes/recent?limit={int(limit)}")

    def get(self, episode_id: int | str) -> Any:
        return self.client.request_with_retry(f"/episodes/{quote(str(episode_id), safe='')}")

    def featured(self) -> Any:
        return self.client.request_with_retry("/episodes/featured")

    def by_category(self, category: str, page: int = 1, limit: int = 10) -> Any:
        query = urlencode({"page": int(page), "limit": int(limit)})
        return self.client.request_with_retry(f"/episodes/category/{quote(category, safe='')}?{query}")
