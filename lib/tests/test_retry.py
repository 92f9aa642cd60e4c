from __future__ import annotations

import httpx
import pytest

from rawfin_client import ApiError, RawfinClient


def _sequence(*statuses: int):
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        status = statuses[min(len(calls), len(statuses) - 1)]
        calls.append(status)
        return httpx.Response(status, json={"attempt": len(calls)})

    return handler, calls


def test_recovers_after_two_server_errors(make_api) -> None:
    handler, calls = _sequence(503, 503, 200)
    api = make_api(handler, max_retries=3)

    assert api.request_with_retry("/episodes/featured") == {"attempt": 3}
    assert len(calls) == 3
    assert api.sleeps == [1.0, 2.0]


@pytest.mark.parametrize("status", [500, 503, 429])
def test_retryable_statuses_exhaust_attempts(make_api, status: int) -> None:
    handler, calls = _sequence(status)
    api = make_api(handler, max_retries=3)

    with pytest.raises(ApiError) as exc:
        api.request_with_retry("/episodes/featured")

    assert exc.value.status == status
    assert exc.value.data == {"attempt": 3}
    assert len(calls) == 3
    assert api.sleeps == [1.0, 2.0]


@pytest.mark.parametrize("status", [400, 401, 403, 404])
def test_client_errors_are_not_retried(make_api, status: int) -> None:
    handler, calls = _sequence(status)
    api = make_api(handler)

    with pytest.raises(ApiError) as exc:
        api.request_with_retry("/auth/profile")

    assert exc.value.status == status
    assert len(calls) == 1
    assert api.sleeps == []


def test_timeout_is_not_retried(make_api) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectTimeout("slow", request=request)

    api = make_api(handler)
    with pytest.raises(ApiError) as exc:
        api.request_with_retry("/episodes/featured")

    assert exc.value.status == 408
    assert len(calls) == 1


def test_transport_error_is_not_retried(make_api) -> None:
    original = httpx.ConnectError("offline")
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise original

    api = make_api(handler)
    with pytest.raises(httpx.ConnectError) as exc:
        api.request_with_retry("/episodes/featured")

    assert exc.value is original
    assert len(calls) == 1
    assert api.sleeps == []


def test_single_attempt_when_max_retries_is_one(make_api) -> None:
    handler, calls = _sequence(503)
    api = make_api(handler, max_retries=1)

    with pytest.raises(ApiError):
        api.request_with_retry("/episodes/featured")

    assert len(calls) == 1


def test_should_retry_classification() -> None:
    assert RawfinClient.should_retry(ApiError("x", 500))
    assert RawfinClient.should_retry(ApiError("x", 429))
    assert not RawfinClient.should_retry(ApiError("x", 408))
    assert not RawfinClient.should_retry(ApiError("x", 404))
    assert not RawfinClient.should_retry(RuntimeError("boom"))
