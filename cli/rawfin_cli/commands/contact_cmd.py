from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import make_client, reported_errors

app = typer.Typer(help="Contact form.")


@app.command("send")
def send(
        name: str = typer.Option(..., "--name", prompt=True, help="Your name."),
        email: str = typer.Option(..., "--email", prompt=True, help="Reply-to email address."),
        message: str = typer.Option(..., "--message", prompt=True, help="Message text."),
        subject: str | None = typer.Option(None, "--subject", help="Optional subject."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not message.strip():
        console.err("Message cannot be empty.")
        raise typer.Exit(code=2)
    payload = {"name": name.strip(), "email": email.strip(), "message": message.strip()}
    if subject:
        payload["subject"] = subject.strip()

    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Sending message"):
            client.contact.submit(payload)
    finally:
        client.close()
    console.ok("Message sent.")
