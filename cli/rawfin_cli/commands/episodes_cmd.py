from __future__ import annotations

from typing import Any

import typer
from rich.table import Table

from .. import console
from ..config import load_config
from ..http import make_client, reported_errors

app = typer.Typer(help="Browse episodes.")


def _items(data: Any) -> list:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("items", "episodes", "results"):
            value = data.get(key)
            if isinstance(value, list):
                return value
    return []


def _print_episodes(title: str, data: Any, *, json_out: bool) -> None:
    if json_out:
        console.print_json(data)
        return
    table = Table(title=title)
    table.add_column("id", style="bold")
    table.add_column("title")
    table.add_column("category")
    table.add_column("published_at")
    for ep in _items(data):
        if not isinstance(ep, dict):
            continue
        table.add_row(
            str(ep.get("id", "-")),
            str(ep.get("title") or "-"),
            str(ep.get("category") or "-"),
            str(ep.get("published_at") or "-"),
        )
    console.console.print(table)


@app.command("recent")
def recent(
        limit: int = typer.Option(6, "--limit", help="Number of episodes."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    if limit < 1:
        console.err("--limit must be >= 1.")
        raise typer.Exit(code=2)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Fetching recent episodes"):
            data = client.episodes.recent(limit)
    finally:
        client.close()
    _print_episodes("Recent episodes", data, json_out=json_out)


@app.command("featured")
def featured(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Fetching featured episodes"):
            data = client.episodes.featured()
    finally:
        client.close()
    _print_episodes("Featured episodes", data, json_out=json_out)


@app.command("get")
def get_episode(
        episode_id: str = typer.Argument(..., help="Episode ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors(f"Fetching episode {episode_id}"):
            data = client.episodes.get(episode_id)
    finally:
        client.close()
    console.print_json(data)


@app.command("category")
def category(
        name: str = typer.Argument(..., help="Category slug."),
        page: int = typer.Option(1, "--page", help="Page number (1-based)."),
        limit: int = typer.Option(10, "--limit", help="Episodes per page."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    if page < 1:
        console.err("--page must be >= 1.")
        raise typer.Exit(code=2)
    if limit < 1:
        console.err("--limit must be >= 1.")
        raise typer.Exit(code=2)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors(f"Fetching category {name}"):
            data = client.episodes.by_category(name, page=page, limit=limit)
    finally:
        client.close()
    _print_episodes(f"{name} (page {page})", data, json_out=json_out)
