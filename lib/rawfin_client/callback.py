from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import parse_qs, urljoin, urlsplit

if TYPE_CHECKING:
    from .client import RawfinClient

logger = logging.getLogger(__name__)

CALLBACK_MARKER = "/auth/callback"
AUTH_FAILED_MESSAGE = "Authentication failed. Please try again."
ERROR_REDIRECT_DELAY_S = 3.0

Notifier = Callable[[str, str], None]


@dataclass(frozen=True)
class CallbackOutcome:
    state: str
    redirect_to: str | None = None
    profile: Any | None = None
    error: BaseException | str | None = None


def is_auth_callback(url: str) -> bool:
    return CALLBACK_MARKER in urlsplit(url).path


def handle_auth_callback(
        client: RawfinClient,
        url: str,
        *,
        notify: Notifier,
        navigate: Callable[[str], None] | None = None,
        sleep: Callable[[float], None] | None = None,
) -> CallbackOutcome:
    """Finish the OAuth round trip for the page URL the provider sent back.

    States: ``ignored`` (not a callback URL, or neither parameter present),
    ``signed_in``, ``profile_failed``, ``provider_error``.
    """
    if not is_auth_callback(url):
        return CallbackOutcome(state="ignored")

    go = navigate or client.browser.open
    home = urljoin(url, "/")
    params = parse_qs(urlsplit(url).query)
    token = (params.get("token") or [""])[0]
    error = (params.get("error") or [""])[0]

    if token:
        client.session.set_token(token)
        result = client.auth.get_profile()
        if not result.ok:
            logger.error("Profile fetch after login failed: %s", result.error)
            return CallbackOutcome(state="profile_failed", error=result.error)
        go(home)
        return CallbackOutcome(state="signed_in", redirect_to=home, profile=result.value)

    if error:
        logger.error("Auth error: %s", error)
        notify(AUTH_FAILED_MESSAGE, "error")
        (sleep or time.sleep)(ERROR_REDIRECT_DELAY_S)
        go(home)
        return CallbackOutcome(state="provider_error", redirect_to=home, error=error)

    return CallbackOutcome(state="ignored")
