from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from rawfin_client.config_types import DEFAULT_BASE_URL

from . import console

APP_NAME = "rawfin"
CONFIG_FILENAME = "config.toml"
ENV_BASE_URL = "RAWFIN_BASE_URL"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0
    max_retries: int = 3
    retry_delay_s: float = 1.0
    beacon: bool = False


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "timeout_s": float(cfg.timeout_s),
        "max_retries": int(cfg.max_retries),
        "retry_delay_s": float(cfg.retry_delay_s),
        "beacon": bool(cfg.beacon),
    }


def _number(data: dict[str, Any], key: str, default: float, cast) -> Any:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return default
    try:
        return cast(value)
    except (TypeError, ValueError):
        return default


def from_toml(data: dict[str, Any]) -> AppConfig:
    defaults = default_config()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    beacon = data.get("beacon")
    return AppConfig(
        base_url=base_url or defaults.base_url,
        timeout_s=max(0.1, _number(data, "timeout_s", defaults.timeout_s, float)),
        max_retries=max(1, _number(data, "max_retries", defaults.max_retries, int)),
        retry_delay_s=max(0.0, _number(data, "retry_delay_s", defaults.retry_delay_s, float)),
        beacon=beacon if isinstance(beacon, bool) else defaults.beacon,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_base_url(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_BASE_URL, "").strip()
    if env_value:
        return normalize_base_url(env_value, warn=True)
    return (cfg.base_url or DEFAULT_BASE_URL).strip().rstrip("/")


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
