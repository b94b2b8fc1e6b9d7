"""Colorized console output for installconfig commands.

Thin wrapper around :mod:`rich` that degrades gracefully when stdout
is not a TTY (e.g. piped, CI).  All user-facing status messages flow
through this module; ``logger.*`` calls are kept for diagnostics.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

# Shared console; force_terminal=None lets Rich detect a TTY.
console = Console(stderr=False, force_terminal=None)

# ── Symbols ────────────────────────────────────────────────────────────────

_PASS = "[bold green]✓[/]"
_FAIL = "[bold red]✗[/]"
_ARROW = "[bold cyan]›[/]"
_DOT = "[dim]·[/]"


def phase(title: str) -> None:
    """Print a bold phase header (e.g. ``LOAD``, ``GENERATE``)."""
    console.print()
    console.print(f"[bold blue]── {title} ──[/]")


# ── Status lines ───────────────────────────────────────────────────────────


def ok(msg: str) -> None:
    """Green checkmark + message."""
    console.print(f"  {_PASS} {msg}")


def fail(msg: str) -> None:
    """Red cross + message."""
    console.print(f"  {_FAIL} [red]{escape(msg)}[/]", highlight=False)


def step(msg: str) -> None:
    """Cyan arrow + action message (in-progress)."""
    console.print(f"  {_ARROW} {msg}")


def info(msg: str) -> None:
    """Dim dot + informational message."""
    console.print(f"  {_DOT} [dim]{msg}[/]")


def detail(key: str, value: str) -> None:
    """Key-value pair, indented."""
    console.print(f"    [bold]{key}[/]: {escape(value)}", highlight=False)


# ── Banners / documents ────────────────────────────────────────────────────


def error_panel(title: str, body: str) -> None:
    """Red-bordered error panel."""
    console.print()
    console.print(
        Panel(
            escape(body),
            title=f"[bold red]{title}[/]",
            border_style="red",
            padding=(1, 2),
        )
    )


def yaml_document(text: str) -> None:
    """Print a YAML document with syntax highlighting."""
    console.print(Syntax(text, "yaml", background_color="default"))
