"""Command implementations for the sirocco-wc CLI."""

from __future__ import annotations

import typer

from . import add, init, styles


def register_commands(app: typer.Typer) -> None:
    """Attach every sirocco-wc command to the root Typer app."""
    app.command("init")(init.init)
    app.command("add")(add.add)
    app.command("buildCss")(styles.build_css)
    app.command("watchCss")(styles.watch_css)


__all__ = ["register_commands"]
