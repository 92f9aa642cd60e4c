from __future__ import annotations

import typer
from rich.table import Table

from .. import console
from ..config import load_config
from ..http import make_client, reported_errors

app = typer.Typer(help="Search episodes.")


def parse_filters(values: list[str] | None) -> dict[str, str]:
    filters: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            console.err(f"Invalid filter {raw!r}, expected key=value.")
            raise typer.Exit(code=2)
        filters[key] = value.strip()
    return filters


@app.command("query")
def query(
        q: str = typer.Argument(..., help="Search text."),
        filters: list[str] | None = typer.Option(None, "--filter", "-f", help="Extra filter as key=value."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    parsed = parse_filters(filters)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Search"):
            data = client.search.search(q, parsed)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    items = data.get("results") or data.get("items") if isinstance(data, dict) else data
    table = Table(title=f"Search: {q}")
    table.add_column("id", style="bold")
    table.add_column("title")
    table.add_column("category")
    for item in items or []:
        if not isinstance(item, dict):
            continue
        table.add_row(
            str(item.get("id", "-")),
            str(item.get("title") or "-"),
            str(item.get("category") or "-"),
        )
    console.console.print(table)


@app.command("suggest")
def suggest(
        q: str = typer.Argument(..., help="Partial search text."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with reported_errors("Suggestions"):
            data = client.search.suggestions(q)
    finally:
        client.close()

    suggestions = data.get("suggestions") if isinstance(data, dict) else data
    if not isinstance(suggestions, list):
        console.print_json(data)
        return
    for item in suggestions:
        console.console.print(str(item))
