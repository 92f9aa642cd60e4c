from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def print_json(data) -> None:
    console.print_json(data=data)


def info(msg: str) -> None:
    console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {msg}")


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {msg}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {msg}")


_NOTIFY_LEVELS = {"success": ok, "warning": warn, "error": err}


def notify(message: str, kind: str = "info") -> None:
    """User-visible notification; ``kind`` is info, success, warning or error."""
    level = _NOTIFY_LEVELS.get(kind)
    if level is None:
        info(message)
        return
    level(escape(message))


def print(*args, **kwargs):
    """Proxy to underlying rich Console.print()."""
    console.print(*args, **kwargs)
