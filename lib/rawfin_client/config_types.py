from __future__ import annotations
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://rawfin.tv/api"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0
    max_retries: int = 3
    retry_delay_s: float = 1.0
    client_version: str | None = None
