"""Exception hierarchy for sirocco-wc."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class SiroccoError(Exception):
    """Base exception for sirocco-wc errors."""
    pass


class ConfigError(SiroccoError):
    """Raised when the project configuration file cannot be used."""


class CatalogError(SiroccoError):
    """Raised when a template variable catalog is malformed."""


class TemplateNotFoundError(SiroccoError):
    """Raised when the template tree for a kind does not exist."""

    def __init__(self, kind: str, path: Path):
        self.kind = kind
        self.path = path
        super().__init__(f"Template '{kind}' not found at {path}")


class PostInitError(SiroccoError):
    """Raised when a post-init setup command exits non-zero.

    The project files have already been relocated when this is raised;
    only the dependency setup is incomplete.
    """

    def __init__(self, command: Sequence[str], exit_code: int, stderr: str = ""):
        self.command = tuple(command)
        self.exit_code = exit_code
        self.stderr = stderr
        message = f"Command '{' '.join(command)}' failed with exit code {exit_code}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class StyleBuildError(SiroccoError):
    """Raised when stylesheets cannot be found or compiled."""


__all__ = [
    "CatalogError",
    "ConfigError",
    "PostInitError",
    "SiroccoError",
    "StyleBuildError",
    "TemplateNotFoundError",
]
