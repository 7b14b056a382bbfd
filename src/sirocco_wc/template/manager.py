"""Template discovery and staging helpers."""

from __future__ import annotations

import importlib.resources
import logging
import os
import shutil
from pathlib import Path

from sirocco_wc.core.constants import TEMPLATE_ROOT_ENV_VAR, VARIABLES_FILE
from sirocco_wc.exceptions import TemplateNotFoundError
from sirocco_wc.template.catalog import TemplateKind

logger = logging.getLogger(__name__)


def get_template_root() -> Path:
    """Return the directory holding one sub-directory per template kind.

    Resolution order:
    1. SIROCCO_TEMPLATE_ROOT environment variable (CI/testing)
    2. importlib.resources.files("sirocco_wc") / "templates" (installed package)
    """
    if env_root := os.environ.get(TEMPLATE_ROOT_ENV_VAR):
        return Path(env_root).expanduser()
    return Path(str(importlib.resources.files("sirocco_wc"))) / "templates"


def get_template_path(kind: TemplateKind, template_root: Path | None = None) -> Path:
    """Return the template tree for *kind*, raising if it is missing."""
    root = template_root if template_root is not None else get_template_root()
    path = root / kind.value
    if not path.is_dir():
        raise TemplateNotFoundError(kind.value, path)
    return path


def stage_template(template_path: Path, staging_path: Path) -> list[Path]:
    """Copy the whole template tree, dotfiles included, into *staging_path*.

    The variable catalog is removed from the staged copy since it describes
    the template and is not part of the generated project.

    Returns:
        Staged entries relative to *staging_path*, sorted.
    """
    if not template_path.is_dir():
        raise TemplateNotFoundError(template_path.name, template_path)

    staging_path.mkdir(parents=True, exist_ok=True)
    for item in template_path.iterdir():
        target = staging_path / item.name
        if item.is_dir():
            shutil.copytree(item, target, dirs_exist_ok=True)
        else:
            shutil.copy2(item, target)

    catalog_copy = staging_path / VARIABLES_FILE
    if catalog_copy.exists():
        catalog_copy.unlink()

    staged = sorted(path.relative_to(staging_path) for path in staging_path.rglob("*"))
    logger.debug("Staged %d entries from %s into %s", len(staged), template_path, staging_path)
    return staged


__all__ = ["get_template_path", "get_template_root", "stage_template"]
