from __future__ import annotations

import logging
import webbrowser
from typing import Protocol

logger = logging.getLogger(__name__)


class Browser(Protocol):
    def open(self, url: str, *, new_tab: bool = False) -> None: ...


class SystemBrowser:
    """Hands URLs to the desktop browser."""

    def open(self, url: str, *, new_tab: bool = False) -> None:
        opened = webbrowser.open_new_tab(url) if new_tab else webbrowser.open(url)
        if not opened:
            logger.warning("No browser available to open %s", url)
