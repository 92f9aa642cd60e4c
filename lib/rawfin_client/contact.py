from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import RawfinClient


@dataclass(frozen=True)
class ContactApi:
    client: RawfinClient

    def submit(self, data: dict[str, Any]) -> Any:
        return self.client.request("/contact", method="POST", json_body=data)
