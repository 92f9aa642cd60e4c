from __future__ import annotations

from typing import Any


class RawfinClientError(Exception):
    """Base client error."""


class ApiError(RawfinClientError):
    """Non-2xx response or client-side timeout (status 408)."""

    def __init__(self, message: str, status: int, data: Any | None = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data if data is not None else {}

    def __repr__(self) -> str:
        return f"ApiError({self.message!r}, status={self.status})"


class ResponseDecodeError(RawfinClientError):
    """2xx response whose body is not valid JSON."""

    def __init__(self, status: int, text: str):
        super().__init__(f"Invalid JSON in response ({status})")
        self.status = status
        self.text = text


class SessionChangedError(RawfinClientError):
    """The session was logged out while a profile/token request was in flight."""
