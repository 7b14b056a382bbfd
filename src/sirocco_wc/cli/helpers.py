"""Shared helpers for sirocco-wc CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from sirocco_wc.core.config import SiroccoConfig, load_config

BANNER = r"""
     _
 ___(_)_ __ ___   ___ ___ ___    __      _____
/ __| | '__/ _ \ / __/ __/ _ \   \ \ /\ / / __|
\__ \ | | | (_) | (_| (_| (_) |   \ V  V / (__
|___/_|_|  \___/ \___\___\___/     \_/\_/ \___|
"""

TAGLINE = "sirocco-wc - Lit web components with Tailwind styles"

console = Console()


def show_banner() -> None:
    """Display the ASCII art banner."""
    colors = ["bright_yellow", "yellow", "orange1", "dark_orange", "red"]
    styled_banner = Text()
    for i, line in enumerate(BANNER.strip("\n").split("\n")):
        styled_banner.append(line + "\n", style=colors[i % len(colors)])

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich; debug detail only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def get_config(ctx: typer.Context) -> SiroccoConfig:
    """Return the configuration loaded at startup, loading it if absent."""
    root = ctx.find_root()
    if not isinstance(root.obj, SiroccoConfig):
        root.obj = load_config(Path.cwd())
    return root.obj


def exit_with_error(exc: BaseException | str, hint: str | None = None) -> NoReturn:
    console.print(f"[red]Error:[/red] {exc}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {hint}")
    raise typer.Exit(1)


__all__ = ["configure_logging", "console", "exit_with_error", "get_config", "show_banner"]
