from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rawfin_client import ApiError, RawfinClient

from .config import load_config
from .http import make_client

INVALID_TOKEN_STATUSES = {401, 403}


@dataclass
class AuthContext:
    state: str
    user: Any | None = None


def resolve_auth_context(*, check_remote: bool = True, client: RawfinClient | None = None) -> AuthContext:
    """One of: no_token, token_present, authed, invalid_token, unreachable.

    A remote check goes through the profile fetch, so a rejected or
    unreachable token ends the local session.
    """
    own_client = client is None
    if client is None:
        client = make_client(load_config())
    try:
        if not client.auth.is_authenticated():
            return AuthContext(state="no_token")
        if not check_remote:
            return AuthContext(state="token_present", user=client.auth.current_user())

        result = client.auth.get_profile()
        if result.ok:
            return AuthContext(state="authed", user=result.value)
        if isinstance(result.error, ApiError) and result.error.status in INVALID_TOKEN_STATUSES:
            return AuthContext(state="invalid_token")
        return AuthContext(state="unreachable")
    finally:
        if own_client:
            client.close()
