"""Setup commands executed after a project has been relocated."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from sirocco_wc.core.process import CommandRunner
from sirocco_wc.exceptions import PostInitError

logger = logging.getLogger(__name__)

YARN_VERSION = "4.10.3"


@dataclass(frozen=True)
class SetupStep:
    """One external command plus the progress line printed before it."""

    label: str
    command: tuple[str, ...]


POST_INIT_STEPS: tuple[SetupStep, ...] = (
    SetupStep(f"Setting up Yarn {YARN_VERSION} (Berry)...", ("yarn", "set", "version", YARN_VERSION)),
    SetupStep("Installing dependencies...", ("yarn", "install")),
    SetupStep("Installing Yarn interactive tools plugin...", ("yarn", "plugin", "import", "interactive-tools")),
    SetupStep(
        "Installing Yarn TypeScript plugin (manages @types/* dependencies automatically)...",
        ("yarn", "plugin", "import", "typescript"),
    ),
    SetupStep("Setting up VSCode SDKs...", ("yarn", "dlx", "@yarnpkg/sdks", "vscode")),
)

ENTRYPOINT_REMINDER = "Please make sure to update the index.html to point to the correct entrypoint in your js code."


class PostInitHook:
    """Run the fixed setup sequence in order, stopping at the first failure."""

    def __init__(
        self,
        runner: CommandRunner,
        console: Console | None = None,
        steps: tuple[SetupStep, ...] = POST_INIT_STEPS,
    ):
        self.runner = runner
        self.console = console or Console()
        self.steps = steps

    def run(self, project_path: Path) -> list[SetupStep]:
        """Execute every step inside *project_path*.

        Raises:
            PostInitError: When a command exits non-zero. Later steps are skipped.
        """
        completed: list[SetupStep] = []
        for step in self.steps:
            self.console.print(f"[cyan]{step.label}[/cyan]")
            logger.info("Running %s in %s", " ".join(step.command), project_path)
            result = self.runner.run(step.command, cwd=project_path)
            if not result.ok:
                logger.debug("Setup step failed: %s -> %d", step.command, result.exit_code)
                raise PostInitError(step.command, result.exit_code, result.stderr)
            completed.append(step)

        self.console.print(f"[yellow]Warning:[/yellow] {ENTRYPOINT_REMINDER}")
        return completed


__all__ = ["ENTRYPOINT_REMINDER", "POST_INIT_STEPS", "PostInitHook", "SetupStep", "YARN_VERSION"]
