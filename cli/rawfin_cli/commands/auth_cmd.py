from __future__ import annotations

import typer

from rawfin_client.callback import handle_auth_callback

from .. import console
from ..auth_state import resolve_auth_context
from ..config import load_config
from ..http import describe_error, make_client
from ..session_store import session_path

app = typer.Typer(help="Auth commands.")

PROVIDERS = ("google", "github", "telegram")


@app.command("login")
def login(
    provider: str = typer.Argument(..., help=f"OAuth provider ({', '.join(PROVIDERS)})."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    provider = provider.strip().lower()
    if not provider:
        console.err("Provider cannot be empty.")
        raise typer.Exit(code=2)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        url = client.auth.login_url(provider)
        client.auth.login(provider)
    finally:
        client.close()
    console.info(f"Continue in the browser: {url}")
    console.info("When the provider redirects back, run `rawfin auth callback <url>` with the final URL.")


@app.command("callback")
def callback(
    url: str = typer.Argument(..., help="Callback URL the provider redirected to."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        outcome = handle_auth_callback(
            client,
            url,
            notify=console.notify,
            navigate=lambda home: console.info(f"Home: {home}"),
        )
    finally:
        client.close()

    if outcome.state == "signed_in":
        name = outcome.profile.get("name") if isinstance(outcome.profile, dict) else None
        console.ok(f"Signed in{f' as {name}' if name else ''}. Session saved to {session_path()}.")
        return
    if outcome.state == "profile_failed":
        console.err(f"Login failed: {describe_error(outcome.error)}")
        raise typer.Exit(code=2)
    if outcome.state == "provider_error":
        raise typer.Exit(code=2)
    console.warn("URL is not an auth callback or carries neither token nor error.")
    raise typer.Exit(code=2)


@app.command("logout", help="Clear the stored token and profile.")
def logout(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        client.auth.logout()
    finally:
        client.close()
    console.ok("Logged out.")


@app.command("whoami")
def whoami(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        if not client.auth.is_authenticated():
            console.err("Not logged in. Run `rawfin auth login <provider>`.")
            raise typer.Exit(code=2)
        result = client.auth.get_profile()
    finally:
        client.close()

    if not result.ok:
        console.err(f"Profile fetch failed, session cleared: {describe_error(result.error)}")
        raise typer.Exit(code=2)
    if json_out:
        console.print_json(result.value)
        return
    profile = result.value if isinstance(result.value, dict) else {}
    console.ok(f"{profile.get('name') or profile.get('email') or 'unknown user'} (id={profile.get('id', '-')})")


@app.command("refresh")
def refresh(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        result = client.auth.refresh_token()
    finally:
        client.close()
    if not result.ok:
        console.err(f"Token refresh failed, session cleared: {describe_error(result.error)}")
        raise typer.Exit(code=2)
    console.ok("Token refreshed.")


@app.command("status")
def status(
    remote: bool = typer.Option(False, "--remote", help="Verify the token against the backend."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    ctx = resolve_auth_context(check_remote=remote)
    if json_out:
        console.print_json({"state": ctx.state, "user": ctx.user})
        return
    if ctx.state in {"authed", "token_present"}:
        console.ok(f"Logged in ({ctx.state}).")
    elif ctx.state == "no_token":
        console.info("Not logged in.")
    else:
        console.warn(f"Session cleared ({ctx.state}).")
