"""Project configuration resolved once per process.

Values come from built-in defaults, then the optional ``.sirocco.yaml``
project file, then ``SWC_*`` environment variables. The result is an
immutable :class:`SiroccoConfig` that is handed to every component, which
keeps the invocation directory an explicit value rather than ambient state.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from sirocco_wc.core.constants import GENERATOR_NAME, PROJECT_CONFIG_FILE, TAILWIND_CONFIG_FILE
from sirocco_wc.exceptions import ConfigError

logger = logging.getLogger(__name__)

# project-file key -> (environment variable, config field)
CONFIG_KEYS: dict[str, tuple[str, str]] = {
    "type": ("SWC_TYPE", "default_component_type"),
    "prefix": ("SWC_PREFIX", "prefix"),
    "index": ("SWC_INDEX", "index"),
    "src": ("SWC_SRC", "src_dir"),
    "dest": ("SWC_DEST", "dest_dir"),
    "css": ("SWC_CSS", "css_glob"),
}


def _package_version() -> str:
    from sirocco_wc import __version__

    return __version__


@dataclass(frozen=True, slots=True)
class SiroccoConfig:
    """Read-only settings shared by every sirocco-wc command."""

    local_path: Path
    default_component_type: str = "components"
    prefix: str = "swc-"
    index: str = "index.ts"
    src_dir: str = "src/main/ts"
    dest_dir: str = "./src/main/webapp/js"
    css_glob: str | None = None
    generator_name: str = GENERATOR_NAME
    generator_version: str = field(default_factory=_package_version)

    @property
    def project_name(self) -> str:
        """Last path segment of the invocation directory."""
        return self.local_path.name

    @property
    def css_pattern(self) -> str:
        return self.css_glob or f"{self.src_dir}/**/*.css"

    @property
    def source(self) -> Path:
        return self.local_path / self.src_dir

    @property
    def source_css(self) -> Path:
        return self.local_path / self.css_pattern

    @property
    def tailwind_config(self) -> Path:
        return self.local_path / TAILWIND_CONFIG_FILE

    def value_of(self, key: str) -> str | None:
        """Return a named setting as a string, or None when unknown or unset."""
        if key == "project_name":
            return self.project_name
        if key == "css_pattern":
            return self.css_pattern
        value = getattr(self, key, None)
        if value is None or isinstance(value, Path):
            return None
        return str(value)


def _read_project_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigError(f"{path} must contain a mapping of settings")

    unknown = sorted(str(key) for key in payload if key not in CONFIG_KEYS)
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", path, ", ".join(unknown))

    return {
        str(key): str(value).strip()
        for key, value in payload.items()
        if key in CONFIG_KEYS and value is not None and str(value).strip()
    }


def load_config(local_path: Path, environ: Mapping[str, str] | None = None) -> SiroccoConfig:
    """Resolve the configuration for a project rooted at *local_path*."""
    env = os.environ if environ is None else environ
    config = SiroccoConfig(local_path=Path(local_path))

    overrides: dict[str, str] = {}
    for key, value in _read_project_file(config.local_path / PROJECT_CONFIG_FILE).items():
        overrides[CONFIG_KEYS[key][1]] = value

    for env_var, field_name in CONFIG_KEYS.values():
        value = env.get(env_var, "").strip()
        if value:
            overrides[field_name] = value

    if overrides:
        logger.debug("Configuration overrides: %s", overrides)
        config = replace(config, **overrides)
    return config


__all__ = ["CONFIG_KEYS", "SiroccoConfig", "load_config"]
