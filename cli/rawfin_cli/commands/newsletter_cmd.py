from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import make_client, reported_errors

app = typer.Typer(help="Newsletter subscription.")


def _check_email(email: str) -> str:
    value = (email or "").strip()
    if "@" not in value:
        console.err("A valid email address is required.")
        raise typer.Exit(code=2)
    return value


@app.command("subscribe")
def subscribe(
        email: str = typer.Argument(..., help="Email address."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    email = _check_email(email)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Subscribe"):
            client.newsletter.subscribe(email)
    finally:
        client.close()
    console.ok(f"Subscribed {email}.")


@app.command("unsubscribe")
def unsubscribe(
        token: str = typer.Argument(..., help="Unsubscribe token from the newsletter email."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Unsubscribe"):
            client.newsletter.unsubscribe(token.strip())
    finally:
        client.close()
    console.ok("Unsubscribed.")


@app.command("status")
def status(
        email: str = typer.Argument(..., help="Email address."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    email = _check_email(email)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Status lookup"):
            data = client.newsletter.status(email)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    subscribed = data.get("subscribed") if isinstance(data, dict) else None
    if subscribed is None:
        console.print_json(data)
    elif subscribed:
        console.ok(f"{email} is subscribed.")
    else:
        console.info(f"{email} is not subscribed.")
