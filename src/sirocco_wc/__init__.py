"""
sirocco-wc - scaffolding and tooling for Lit web component projects.

Usage:
    sirocco-wc init [--template default|showcase]
    sirocco-wc add <component> [--type <type>]
    sirocco-wc buildCss
    sirocco-wc watchCss
"""

__version__ = "1.4.0"

from pathlib import Path

import typer
from typer.core import TyperGroup

from sirocco_wc.cli.commands import register_commands
from sirocco_wc.cli.helpers import configure_logging, console, exit_with_error, show_banner
from sirocco_wc.core.config import load_config
from sirocco_wc.exceptions import ConfigError


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="sirocco-wc",
    help="Scaffold Lit web component projects and build their Tailwind styles",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sirocco-wc {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """Load the project configuration and show the banner when no subcommand is provided."""
    configure_logging(verbose)
    try:
        ctx.obj = load_config(Path.cwd())
    except ConfigError as exc:
        exit_with_error(exc)

    if ctx.invoked_subcommand is None:
        show_banner()
        console.print("[dim]Run 'sirocco-wc --help' for usage information[/dim]")


register_commands(app)


def main():
    app()


__all__ = ["__version__", "app", "main"]


if __name__ == "__main__":
    main()
