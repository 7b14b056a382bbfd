"""``sirocco-wc add``: create a Lit component and rebuild styles."""

from __future__ import annotations

from typing import Optional

import typer

from sirocco_wc.cli.helpers import console, exit_with_error, get_config
from sirocco_wc.components import add_component
from sirocco_wc.core.process import SubprocessRunner
from sirocco_wc.exceptions import SiroccoError
from sirocco_wc.styles import build_styles


def add(
    ctx: typer.Context,
    component: str = typer.Argument(..., help="Name of the component"),
    component_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Component Type (defaults to SWC_TYPE or 'components')",
    ),
) -> None:
    """add component"""
    config = get_config(ctx)

    try:
        files = add_component(config, component, component_type)
    except OSError as exc:
        exit_with_error(exc)

    type_dir = files.type_index.parent
    console.print(
        f"[yellow]Warning:[/yellow] Finished to create {component} and linked in {type_dir}, "
        f"however you may need to link to {type_dir} from your main js."
    )

    try:
        built = build_styles(config, SubprocessRunner())
    except (SiroccoError, OSError) as exc:
        exit_with_error(exc)
    console.print(f"[green]✔[/green] Built {len(built)} style module(s)")


__all__ = ["add"]
