"""Project initialization pipeline.

Stages run strictly in order::

    Idle -> Staged -> Collected -> Substituted -> Relocated -> PostInitComplete

Any error moves the pipeline to ``Aborted`` and is re-raised. Nothing is rolled
back: an aborted run leaves ``<cwd>/tmp`` behind for inspection, and a failed
post-init step leaves the relocated project in place.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Mapping

from rich.console import Console

from sirocco_wc.core.config import SiroccoConfig
from sirocco_wc.core.constants import STAGING_DIR
from sirocco_wc.template.catalog import TemplateKind, TemplateVariable, load_catalog
from sirocco_wc.template.collector import PromptFn, collect_values
from sirocco_wc.template.manager import get_template_path, stage_template
from sirocco_wc.template.post_init import PostInitHook
from sirocco_wc.template.relocator import relocate
from sirocco_wc.template.renderer import substitute_tree

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "idle"
    STAGED = "staged"
    COLLECTED = "collected"
    SUBSTITUTED = "substituted"
    RELOCATED = "relocated"
    POST_INIT_COMPLETE = "post_init_complete"
    ABORTED = "aborted"


class InitPipeline:
    """Scaffold a project into ``config.local_path`` from a template kind.

    Args:
        config: Resolved configuration; ``local_path`` is the target directory.
        kind: Template tree and catalog to use.
        prompt: Per-variable prompt; defaults to an interactive terminal prompt.
        post_init: Setup hook run after relocation, or None to skip it.
        template_root: Directory holding the template kinds (defaults to the
            packaged templates).
        console: Where progress lines are printed.
    """

    def __init__(
        self,
        config: SiroccoConfig,
        kind: TemplateKind = TemplateKind.DEFAULT,
        *,
        prompt: PromptFn | None = None,
        post_init: PostInitHook | None = None,
        template_root: Path | None = None,
        console: Console | None = None,
    ):
        self.config = config
        self.kind = kind
        self.prompt = prompt
        self.post_init = post_init
        self.template_root = template_root
        self.console = console or Console()
        self.state = PipelineState.IDLE
        self.template_path: Path | None = None
        self.variables: list[TemplateVariable] = []
        self.values: Mapping[str, str] = {}

    @property
    def project_path(self) -> Path:
        return self.config.local_path

    @property
    def staging_path(self) -> Path:
        return self.config.local_path / STAGING_DIR

    def run(self) -> Mapping[str, str]:
        """Execute every stage and return the collected values."""
        try:
            self.stage()
            self.collect()
            self.substitute()
            self.relocate()
            if self.post_init is not None:
                self.run_post_init()
        except (Exception, KeyboardInterrupt):
            logger.debug("Initialization aborted in state %s", self.state.value)
            self.state = PipelineState.ABORTED
            raise
        return self.values

    def _require(self, expected: PipelineState, next_state: PipelineState) -> None:
        if self.state is not expected:
            raise RuntimeError(f"Cannot enter {next_state.value} from {self.state.value}")

    def stage(self) -> None:
        self._require(PipelineState.IDLE, PipelineState.STAGED)
        self.console.print(f"Using '[cyan]{self.kind.value}[/cyan]' template...")
        self.template_path = get_template_path(self.kind, self.template_root)
        self.console.print("Copying files to temp dir...")
        stage_template(self.template_path, self.staging_path)
        self.console.print("[green]✔[/green] The files have been copied!")
        self.state = PipelineState.STAGED

    def collect(self) -> None:
        self._require(PipelineState.STAGED, PipelineState.COLLECTED)
        if self.template_path is None:
            raise RuntimeError("Template path is unset; stage() did not run")
        self.variables = load_catalog(self.template_path, self.config)
        self.console.print("Please fill the following values...")
        self.values = collect_values(self.variables, self.prompt)
        self.state = PipelineState.COLLECTED

    def substitute(self) -> None:
        self._require(PipelineState.COLLECTED, PipelineState.SUBSTITUTED)
        self.console.print("Start replacing, please be patient!")
        rewritten = substitute_tree(self.staging_path, self.values)
        logger.info("Rewrote %d staged files", len(rewritten))
        self.state = PipelineState.SUBSTITUTED

    def relocate(self) -> None:
        self._require(PipelineState.SUBSTITUTED, PipelineState.RELOCATED)
        self.console.print("Moving files to final destination")
        relocate(self.staging_path, self.project_path)
        self.console.print("[green]✔ Success![/green]")
        self.state = PipelineState.RELOCATED

    def run_post_init(self) -> None:
        self._require(PipelineState.RELOCATED, PipelineState.POST_INIT_COMPLETE)
        if self.post_init is None:
            raise RuntimeError("No post-init hook configured")
        self.post_init.run(self.project_path)
        self.state = PipelineState.POST_INIT_COMPLETE


__all__ = ["InitPipeline", "PipelineState"]
