"""``sirocco-wc buildCss`` and ``sirocco-wc watchCss``."""

from __future__ import annotations

from functools import partial

import typer

from sirocco_wc.cli.helpers import console, exit_with_error, get_config
from sirocco_wc.core.process import SubprocessRunner
from sirocco_wc.exceptions import SiroccoError
from sirocco_wc.styles import StyleWatcher, build_style_file, build_styles, find_style_files


def build_css(ctx: typer.Context) -> None:
    """Building style.ts files"""
    config = get_config(ctx)
    try:
        built = build_styles(config, SubprocessRunner())
    except (SiroccoError, OSError) as exc:
        exit_with_error(exc, f"Set SWC_CSS to change the stylesheet pattern ({config.css_pattern}).")

    for path in built:
        console.print(f"[green]✔[/green] {path.relative_to(config.local_path)}")
    console.print(f"Found {len(built)} style files")


def watch_css(
    ctx: typer.Context,
    interval: float = typer.Option(0.5, "--interval", min=0.05, help="Seconds between scans"),
) -> None:
    """Watch changes and rebuild"""
    config = get_config(ctx)
    watcher = StyleWatcher(
        config,
        build=partial(build_style_file, config=config, runner=SubprocessRunner()),
        interval=interval,
        console=console,
    )
    console.print(f"Watching [cyan]{config.css_pattern}[/cyan] ({len(find_style_files(config))} files). Press Ctrl+C to stop.")
    try:
        watcher.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped watching[/yellow]")


__all__ = ["build_css", "watch_css"]
