from __future__ import annotations

from contextlib import contextmanager
from importlib import metadata
from typing import Iterator

import httpx
import typer

from rawfin_client import ApiError, RawfinClient, ResponseDecodeError
from rawfin_client.beacon import ThreadedBeacon
from rawfin_client.config_types import ClientConfig
from rawfin_client.session import AuthSession

from . import console
from .config import AppConfig, normalize_base_url, resolve_base_url
from .session_store import FileSessionStore


def cli_version() -> str:
    try:
        return metadata.version("rawfin")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def make_client(
    cfg: AppConfig,
    *,
    base_url_override: str | None = None,
    session: AuthSession | None = None,
) -> RawfinClient:
    base_url = normalize_base_url(base_url_override, warn=True) if base_url_override else resolve_base_url(cfg)
    return RawfinClient(
        ClientConfig(
            base_url=base_url,
            timeout_s=cfg.timeout_s,
            max_retries=cfg.max_retries,
            retry_delay_s=cfg.retry_delay_s,
            client_version=cli_version(),
        ),
        session=session if session is not None else AuthSession(FileSessionStore()),
        beacon=ThreadedBeacon(timeout_s=cfg.timeout_s) if cfg.beacon else None,
    )


def describe_error(exc: BaseException) -> str:
    if isinstance(exc, ApiError):
        if exc.status == 408:
            return "request timed out"
        detail = exc.data.get("detail") if isinstance(exc.data, dict) else None
        return f"{exc} ({detail})" if detail else str(exc)
    if isinstance(exc, ResponseDecodeError):
        return str(exc)
    if isinstance(exc, httpx.TransportError):
        return f"network error: {exc}"
    if isinstance(exc, (httpx.RequestError, httpx.InvalidURL)):
        return f"request error: {exc}"
    return str(exc)


@contextmanager
def reported_errors(action: str) -> Iterator[None]:
    try:
        yield
    except (ApiError, ResponseDecodeError, httpx.RequestError, httpx.InvalidURL) as e:
        console.err(f"{action} failed: {describe_error(e)}")
        raise typer.Exit(code=2)
