"""Lit component skeleton generation for ``sirocco-wc add``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sirocco_wc.core.config import SiroccoConfig

logger = logging.getLogger(__name__)

CSS_PLACEHOLDER = "/* You do not need it but the build system does*/"


@dataclass(frozen=True)
class ComponentFiles:
    """Paths written for one new component."""

    directory: Path
    module: Path
    stylesheet: Path
    index: Path
    type_index: Path


def component_class_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def render_component_module(name: str, prefix: str) -> str:
    class_name = component_class_name(name)
    return f"""import {{ LitElement, html }} from 'lit';
import {{ customElement }} from 'lit/decorators'
import Styles from './{class_name}.styles';

@customElement('{prefix}{name}')
export class {class_name} extends LitElement {{
  static styles = [ Styles ];

  render() {{
    return html`{prefix}{name}`;
  }}
}}"""


def render_component_index(name: str) -> str:
    class_name = component_class_name(name)
    return f"""export * from './{class_name}';
export {{ default as {class_name}Style }} from './{class_name}.styles';
"""


def add_component(config: SiroccoConfig, name: str, component_type: str | None = None) -> ComponentFiles:
    """Write a component skeleton and export it from its type index.

    Existing component files are overwritten; the type index is appended to.
    """
    component_type = component_type or config.default_component_type
    class_name = component_class_name(name)
    type_dir = config.source / component_type
    component_dir = type_dir / name

    files = ComponentFiles(
        directory=component_dir,
        module=component_dir / f"{class_name}.ts",
        stylesheet=component_dir / f"{class_name}.css",
        index=component_dir / "index.ts",
        type_index=type_dir / "index.ts",
    )

    component_dir.mkdir(parents=True, exist_ok=True)
    files.module.write_text(render_component_module(name, config.prefix), encoding="utf-8")
    files.stylesheet.write_text(CSS_PLACEHOLDER, encoding="utf-8")
    files.index.write_text(render_component_index(name), encoding="utf-8")
    with files.type_index.open("a", encoding="utf-8") as handle:
        handle.write(f"export * from './{name}/index';\n")

    logger.debug("Created component %s in %s", name, component_dir)
    return files


__all__ = [
    "CSS_PLACEHOLDER",
    "ComponentFiles",
    "add_component",
    "component_class_name",
    "render_component_index",
    "render_component_module",
]
