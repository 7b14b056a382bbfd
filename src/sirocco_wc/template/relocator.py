"""Move a finished staging tree into the project directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from sirocco_wc.core.constants import GITIGNORE, GITIGNORE_TEMPLATE

logger = logging.getLogger(__name__)


def _move_over(source: Path, target: Path) -> None:
    """Move *source* to *target*, replacing files and merging directories."""
    if source.is_dir() and not source.is_symlink() and target.is_dir() and not target.is_symlink():
        for child in source.iterdir():
            _move_over(child, target / child.name)
        source.rmdir()
        return

    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()
    shutil.move(str(source), str(target))


def relocate(staging_path: Path, project_path: Path) -> list[str]:
    """Publish the staged tree into *project_path* and drop the staging dir.

    ``_.gitignore`` is renamed to ``.gitignore`` first. Dotfiles move before
    regular entries. Anything already in *project_path* with the same name is
    overwritten without asking.

    Returns:
        Names of the top-level entries that were moved.
    """
    gitignore_template = staging_path / GITIGNORE_TEMPLATE
    if gitignore_template.exists():
        gitignore_template.rename(staging_path / GITIGNORE)

    project_path.mkdir(parents=True, exist_ok=True)
    entries = sorted(staging_path.iterdir(), key=lambda p: (not p.name.startswith("."), p.name))
    moved: list[str] = []
    for entry in entries:
        _move_over(entry, project_path / entry.name)
        moved.append(entry.name)
        logger.debug("Moved %s -> %s", entry.name, project_path)

    shutil.rmtree(staging_path)
    return moved


__all__ = ["relocate"]
