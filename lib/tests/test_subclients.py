from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx

from rawfin_client.beacon import ThreadedBeacon


def _recorder(payload=None):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=payload if payload is not None else {"ok": True})

    return handler, seen


def test_newsletter_endpoints(make_api) -> None:
    handler, seen = _recorder()
    api = make_api(handler)

    api.newsletter.subscribe("ada@example.com")
    api.newsletter.unsubscribe("tok-1")
    api.newsletter.status("ada+news@example.com")

    assert [(r.method, r.url.path) for r in seen] == [
        ("POST", "/api/newsletter/subscribe"),
        ("POST", "/api/newsletter/unsubscribe"),
        ("GET", "/api/newsletter/status"),
    ]
    assert json.loads(seen[0].content) == {"email": "ada@example.com"}
    assert json.loads(seen[1].content) == {"token": "tok-1"}
    assert seen[2].url.params["email"] == "ada+news@example.com"


def test_search_passes_filters_verbatim(make_api) -> None:
    handler, seen = _recorder({"results": []})
    api = make_api(handler)

    assert api.search.search("tuna", {"category": "fishing", "x-unknown": "1"}) == {"results": []}
    api.search.suggestions("tu")

    query = parse_qs(seen[0].url.query.decode())
    assert seen[0].url.path == "/api/search"
    assert query == {"q": ["tuna"], "category": ["fishing"], "x-unknown": ["1"]}
    assert seen[1].url.path == "/api/search/suggestions"
    assert seen[1].url.params["q"] == "tu"


def test_episode_endpoints(make_api) -> None:
    handler, seen = _recorder()
    api = make_api(handler)

    api.episodes.recent()
    api.episodes.get(42)
    api.episodes.featured()
    api.episodes.by_category("deep sea", page=2, limit=5)

    assert str(seen[0].url) == "https://x/api/episodes/recent?limit=6"
    assert seen[1].url.path == "/api/episodes/42"
    assert seen[2].url.path == "/api/episodes/featured"
    assert seen[3].url.raw_path == b"/api/episodes/category/deep%20sea?page=2&limit=5"


def test_episode_reads_retry_on_server_error(make_api) -> None:
    statuses = iter([503, 200])

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(next(statuses), json={"id": 1})

    api = make_api(handler)

    assert api.episodes.get(1) == {"id": 1}
    assert api.sleeps == [1.0]


def test_contact_submit(make_api) -> None:
    handler, seen = _recorder()
    api = make_api(handler)

    api.contact.submit({"name": "Ada", "email": "ada@example.com", "message": "hi"})

    assert seen[0].method == "POST"
    assert seen[0].url.path == "/api/contact"
    assert json.loads(seen[0].content)["message"] == "hi"


def test_telegram_endpoints_and_link(make_api) -> None:
    handler, seen = _recorder()
    api = make_api(handler)

    api.telegram.bot_info()
    api.telegram.send_message(99, "hello")

    assert seen[0].url.path == "/api/telegram/bot-info"
    assert json.loads(seen[1].content) == {"chatId": 99, "message": "hello"}
    assert api.telegram.bot_link() == "https://t.me/rawfin_bot"


def test_open_bot_does_not_touch_network(make_api) -> None:
    handler, seen = _recorder()
    api = make_api(handler)

    api.telegram.open_bot()

    assert seen == []
    assert api.browser.opened == [("https://t.me/rawfin_bot", True)]


class _FakeBeacon:
    def __init__(self) -> None:
        self.sent: list[tuple[str, dict]] = []

    def send(self, url: str, payload: dict) -> bool:
        self.sent.append((url, payload))
        return True


def test_track_prefers_beacon(make_api) -> None:
    handler, seen = _recorder()
    beacon = _FakeBeacon()
    api = make_api(handler, beacon=beacon)

    assert api.analytics.track_page_view("/episodes") is None

    assert seen == []
    url, payload = beacon.sent[0]
    assert url == "https://x/api/analytics/track"
    assert payload["event"] == "page_view"
    assert payload["data"] == {"url": "/episodes"}
    assert isinstance(payload["timestamp"], int)


def test_track_falls_back_to_request(make_api) -> None:
    handler, seen = _recorder({"tracked": True})
    api = make_api(handler)

    assert api.analytics.track_event("video", "play", label="ep-1", value=3) == {"tracked": True}

    assert seen[0].method == "POST"
    assert seen[0].url.path == "/api/analytics/track"
    assert json.loads(seen[0].content) == {
        "event": "event",
        "data": {"category": "video", "action": "play", "label": "ep-1", "value": 3},
    }


def test_threaded_beacon_delivers_and_hides_failures() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(503)

    beacon = ThreadedBeacon(http_transport=httpx.MockTransport(handler))
    assert beacon.send("https://x/api/analytics/track", {"event": "e", "data": {}, "timestamp": 1}) is True
    beacon.close()

    assert seen == [{"event": "e", "data": {}, "timestamp": 1}]


def test_threaded_beacon_swallows_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline")

    beacon = ThreadedBeacon(http_transport=httpx.MockTransport(handler))
    assert beacon.send("https://x/api/analytics/track", {"event": "e"}) is True
    beacon.close()


def test_search_list_filter_repeats_key(make_api) -> None:
    handler, seen = _recorder({"results": []})
    api = make_api(handler)

    api.search.search("tuna", {"tag": ["a", "b"], "page": 2})

    assert seen[0].url.params.get_list("tag") == ["a", "b"]
    assert seen[0].url.params["page"] == "2"
