from __future__ import annotations

import logging
import os
from pathlib import Path

import tomllib
import tomli_w

from .config import config_path

logger = logging.getLogger(__name__)

SESSION_FILENAME = "session.toml"


def session_path() -> Path:
    return Path(config_path()).expanduser().parent / SESSION_FILENAME


class FileSessionStore:
    """Session slots persisted as a flat TOML table next to config.toml."""

    def __init__(self, path: Path | None = None):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path or session_path()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        path = self.path
        if not data:
            if path.exists():
                path.unlink()
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(tomli_w.dumps(data).encode("utf-8"))
        os.chmod(path, 0o600)

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
