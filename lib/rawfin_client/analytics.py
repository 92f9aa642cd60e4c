from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import RawfinClient

TRACK_ENDPOINT = "/analytics/track"


@dataclass(frozen=True)
class AnalyticsApi:
    client: RawfinClient

    def track(self, event: str, data: dict[str, Any] | None = None) -> Any:
        """Record an event.

        With a beacon configured the event is handed off and ``None`` is
        returned; delivery is not observable. Otherwise it is posted with
        the regular request and the backend reply is returned.
        """
        data = data or {}
        beacon = self.client.beacon
        if beacon is not None:
            payload = {"event": event, "data": data, "timestamp": int(time.time() * 1000)}
            beacon.send(self.client.url_for(TRACK_ENDPOINT), payload)
            return None
        return self.client.request(TRACK_ENDPOINT, method="POST", json_body={"event": event, "data": data})

    def track_page_view(self, url: str = "/") -> Any:
        return self.track("page_view", {"url": url})

    def track_event(self, category: str, action: str, label: str = "", value: int = 0) -> Any:
        return self.track("event", {"category": category, "action": action, "label": label, "value": value})
