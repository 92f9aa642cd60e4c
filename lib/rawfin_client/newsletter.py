from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

if TYPE_CHECKING:
    from .client import RawfinClient


@dataclass(frozen=True)
class NewsletterApi:
    client: RawfinClient

    def subscribe(self, email: str) -> Any:
        return self.client.request("/newsletter/subscribe", method="POST", json_body={"email": email})

    def unsubscribe(self, token: str) -> Any:
        return self.client.request("/newsletter/unsubscribe", method="POST", json_body={"token": token})

    def status(self, email: str) -> Any:
        return self.client.request_with_retry(f"/newsletter/status?{urlencode({'email': email})}")
