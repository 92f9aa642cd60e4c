from __future__ import annotations

import json

import typer

from .. import console
from ..config import load_config
from ..http import make_client, reported_errors

app = typer.Typer(help="Send analytics events.")


def _report(data) -> None:
    if data is None:
        console.info("Event queued.")
    else:
        console.ok("Event recorded.")


@app.command("track")
def track(
        event: str = typer.Argument(..., help="Event name."),
        data: str | None = typer.Option(None, "--data", help="Event data as a JSON object."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    payload = {}
    if data:
        try:
            payload = json.loads(data)
        except ValueError as e:
            console.err(f"--data is not valid JSON: {e}")
            raise typer.Exit(code=2)
        if not isinstance(payload, dict):
            console.err("--data must be a JSON object.")
            raise typer.Exit(code=2)

    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Tracking"):
            result = client.analytics.track(event, payload)
    finally:
        client.close()
    _report(result)


@app.command("page-view")
def page_view(
        url: str = typer.Argument("/", help="Page path."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Tracking"):
            result = client.analytics.track_page_view(url)
    finally:
        client.close()
    _report(result)


@app.command("event")
def event(
        category: str = typer.Argument(..., help="Event category."),
        action: str = typer.Argument(..., help="Event action."),
        label: str = typer.Option("", "--label", help="Event label."),
        value: int = typer.Option(0, "--value", help="Event value."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Tracking"):
            result = client.analytics.track_event(category, action, label=label, value=value)
    finally:
        client.close()
    _report(result)
