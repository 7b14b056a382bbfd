"""``sirocco-wc init``: scaffold a project in the current directory."""

from __future__ import annotations

import re

import typer

from sirocco_wc.cli.helpers import console, exit_with_error, get_config
from sirocco_wc.core.process import SubprocessRunner
from sirocco_wc.exceptions import PostInitError, SiroccoError
from sirocco_wc.template import InitPipeline, PipelineState, PostInitHook, TemplateKind


def init(
    ctx: typer.Context,
    template: TemplateKind = typer.Option(
        TemplateKind.DEFAULT,
        "--template",
        "-t",
        case_sensitive=False,
        help="Template to scaffold from",
    ),
    no_install: bool = typer.Option(
        False,
        "--no-install",
        help="Skip the Yarn setup commands after the files are in place",
    ),
) -> None:
    """Scaffolding your project.

    Copies the template into ./tmp, asks for the template variables, replaces
    every [VARIABLE] placeholder, moves the result into the current directory
    and finally runs the Yarn setup steps.
    """
    config = get_config(ctx)
    post_init = None if no_install else PostInitHook(SubprocessRunner(capture_output=False), console=console)
    pipeline = InitPipeline(config, template, post_init=post_init, console=console)

    try:
        pipeline.run()
    except PostInitError as exc:
        exit_with_error(exc, "Project files are in place; re-run the failed command manually.")
    except (SiroccoError, OSError, re.error) as exc:
        hint = None
        if pipeline.state is PipelineState.ABORTED and pipeline.staging_path.exists():
            hint = f"Partial output left in {pipeline.staging_path} for inspection."
        exit_with_error(exc, hint)


__all__ = ["init"]
