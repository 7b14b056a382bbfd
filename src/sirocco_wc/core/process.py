"""External command execution behind a small capability interface."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]


@dataclass(frozen=True)
class CommandResult:
    """Normalized outcome of one external command."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandRunner(Protocol):
    """Anything that can run a command and report its result."""

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        input_text: str | None = None,
    ) -> CommandResult: ...


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`.

    With ``capture_output=False`` the child inherits the terminal, which suits
    long installs whose progress the user should see.
    """

    def __init__(self, capture_output: bool = True, timeout: float | None = None):
        self.capture_output = capture_output
        self.timeout = timeout

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        input_text: str | None = None,
    ) -> CommandResult:
        args = list(command)
        logger.debug("Running %s (cwd=%s)", " ".join(args), cwd)
        try:
            completed = subprocess.run(
                args,
                cwd=str(cwd) if cwd else None,
                input=input_text,
                capture_output=self.capture_output,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            return CommandResult(
                exit_code=127,
                stderr=f"{args[0]} executable not found on PATH",
            )
        except subprocess.TimeoutExpired:
            return CommandResult(
                exit_code=124,
                stderr=f"command timed out: {' '.join(args)}",
            )
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
