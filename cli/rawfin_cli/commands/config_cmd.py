from __future__ import annotations

import typer

from .. import console
from ..config import load_config, normalize_base_url, resolve_base_url, save_config

app = typer.Typer(help="Client settings.")


@app.command("show")
def show(
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    effective = resolve_base_url(cfg)
    if json_out:
        console.print_json(
            {
                "base_url": cfg.base_url,
                "effective_base_url": effective,
                "timeout_s": cfg.timeout_s,
                "max_retries": cfg.max_retries,
                "retry_delay_s": cfg.retry_delay_s,
                "beacon": cfg.beacon,
            }
        )
        return
    console.console.print(
        f"base_url={effective} timeout_s={cfg.timeout_s} max_retries={cfg.max_retries} "
        f"retry_delay_s={cfg.retry_delay_s} beacon={'on' if cfg.beacon else 'off'}"
    )


@app.command("set")
def set_value(
        base_url: str | None = typer.Option(None, "--base-url", help="Backend API origin."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
        max_retries: int | None = typer.Option(None, "--max-retries", help="Total attempts for retried reads."),
        retry_delay_s: float | None = typer.Option(None, "--retry-delay", help="Base retry delay in seconds."),
        beacon: bool | None = typer.Option(None, "--beacon/--no-beacon", help="Send analytics in the background."),
):
    cfg = load_config()

    if base_url is not None:
        normalized = normalize_base_url(base_url, warn=True)
        if not normalized:
            console.err("base_url cannot be empty.")
            raise typer.Exit(code=2)
        cfg.base_url = normalized
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("--timeout must be > 0.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    if max_retries is not None:
        if max_retries < 1:
            console.err("--max-retries must be >= 1.")
            raise typer.Exit(code=2)
        cfg.max_retries = max_retries
    if retry_delay_s is not None:
        if retry_delay_s < 0:
            console.err("--retry-delay must be >= 0.")
            raise typer.Exit(code=2)
        cfg.retry_delay_s = retry_delay_s
    if beacon is not None:
        cfg.beacon = beacon

    path = save_config(cfg)
    console.ok(f"Config updated: {path}")
