"""Template kinds and their variable catalogs.

Each template tree carries a ``_variables.yaml`` catalog::

    variables:
      - name: Name
        default_from: project_name
      - name: Version
        default: "1.0.0"
      - name: Description

``default_from`` names a configuration setting; it takes precedence over the
literal ``default`` whenever the setting resolves to a non-empty value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from sirocco_wc.core.config import SiroccoConfig
from sirocco_wc.core.constants import VARIABLES_FILE
from sirocco_wc.exceptions import CatalogError
from sirocco_wc.template.renderer import placeholder_token

logger = logging.getLogger(__name__)


class TemplateKind(str, Enum):
    """Selector for the template tree used by ``init``."""

    DEFAULT = "default"
    SHOWCASE = "showcase"


@dataclass(frozen=True)
class TemplateVariable:
    """A named placeholder collected from the user before substitution."""

    name: str
    default: str | None = None

    @property
    def token(self) -> str:
        """Placeholder as it appears in template files, e.g. ``[NAME]``."""
        return placeholder_token(self.name)


def _as_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _resolve_default(entry: dict, config: SiroccoConfig) -> str | None:
    default = _as_text(entry.get("default"))
    source = entry.get("default_from")
    if source:
        configured = config.value_of(str(source))
        if configured:
            return configured
        logger.debug("Setting %r is unset; falling back to literal default %r", source, default)
    return default


def parse_catalog(data: object, config: SiroccoConfig, origin: Path | str = "<catalog>") -> list[TemplateVariable]:
    """Build the ordered variable list from a parsed catalog document."""
    entries = data.get("variables") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise CatalogError(f"{origin}: expected a list of variables")

    variables: list[TemplateVariable] = []
    seen: set[str] = set()
    for position, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict) or not str(entry.get("name") or "").strip():
            raise CatalogError(f"{origin}: variable #{position} has no name")
        name = str(entry["name"]).strip()
        if name.upper() in seen:
            raise CatalogError(f"{origin}: variable '{name}' is declared more than once")
        seen.add(name.upper())
        variables.append(TemplateVariable(name=name, default=_resolve_default(entry, config)))
    return variables


def load_catalog(template_path: Path, config: SiroccoConfig) -> list[TemplateVariable]:
    """Read the variable catalog that ships inside *template_path*."""
    catalog_path = template_path / VARIABLES_FILE
    if not catalog_path.is_file():
        raise CatalogError(f"Variable catalog not found at {catalog_path}")

    yaml = YAML(typ="safe")
    try:
        with catalog_path.open("r", encoding="utf-8") as handle:
            data = yaml.load(handle)
    except YAMLError as exc:
        raise CatalogError(f"Failed to parse {catalog_path}: {exc}") from exc

    variables = parse_catalog(data, config, origin=catalog_path)
    logger.debug("Loaded %d variables from %s", len(variables), catalog_path)
    return variables


__all__ = ["TemplateKind", "TemplateVariable", "load_catalog", "parse_catalog"]
