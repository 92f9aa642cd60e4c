from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import make_client, reported_errors

app = typer.Typer(help="Telegram bot.")


@app.command("info")
def info(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Fetching bot info"):
            data = client.telegram.bot_info()
    finally:
        client.close()
    console.print_json(data)


@app.command("send")
def send(
        chat_id: str = typer.Argument(..., help="Telegram chat ID."),
        message: str = typer.Argument(..., help="Message text."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Sending message"):
            client.telegram.send_message(int(chat_id) if chat_id.lstrip("-").isdigit() else chat_id, message)
    finally:
        client.close()
    console.ok("Message sent.")


@app.command("link")
def link():
    client = make_client(load_config())
    try:
        console.console.print(client.telegram.bot_link())
    finally:
        client.close()


@app.command("open")
def open_bot():
    client = make_client(load_config())
    try:
        client.telegram.open_bot()
        url = client.telegram.bot_link()
    finally:
        client.close()
    console.info(f"Opened {url}")
