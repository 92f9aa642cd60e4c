from __future__ import annotations

import typer

from .commands import (
    analytics_cmd,
    auth_cmd,
    config_cmd,
    contact_cmd,
    episodes_cmd,
    newsletter_cmd,
    search_cmd,
    telegram_cmd,
)
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="rawfin",
        help="rawfin CLI",
        no_args_is_help=True,
    )

    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(newsletter_cmd.app, name="newsletter")
    app.add_typer(search_cmd.app, name="search")
    app.add_typer(episodes_cmd.app, name="episodes")
    app.add_typer(contact_cmd.app, name="contact")
    app.add_typer(telegram_cmd.app, name="telegram")
    app.add_typer(analytics_cmd.app, name="analytics")
    app.add_typer(config_cmd.app, name="config")
    app.command("whoami")(auth_cmd.whoami)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
