"""Compile component stylesheets into Lit ``css`` modules.

Each ``Foo.css`` is wrapped with the Tailwind layer directives, run through the
Tailwind CLI with ``Foo.ts`` as its only content source, and written next to
the original as ``Foo.styles.ts``.
"""

from __future__ import annotations

import glob
import logging
import re
import tempfile
from pathlib import Path

from sirocco_wc.core.config import SiroccoConfig
from sirocco_wc.core.process import CommandRunner
from sirocco_wc.exceptions import StyleBuildError

logger = logging.getLogger(__name__)

TAILWIND_PREAMBLE = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""

TAILWIND_EXECUTABLE: tuple[str, ...] = ("npx", "tailwindcss")

_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


def styles_module_path(stylesheet: Path) -> Path:
    return stylesheet.with_name(f"{stylesheet.stem}.styles.ts")


def component_module_path(stylesheet: Path) -> Path:
    return stylesheet.with_name(f"{stylesheet.stem}.ts")


def find_style_files(config: SiroccoConfig) -> list[Path]:
    """Stylesheets matching the configured CSS pattern, sorted."""
    pattern = config.source_css.as_posix()
    return sorted(Path(match) for match in glob.glob(pattern, recursive=True) if Path(match).is_file())


def strip_css_comments(css: str) -> str:
    return _BLOCK_COMMENT_RE.sub("", css)


def css_to_module(css: str) -> str:
    """Render processed CSS as a TypeScript module exporting a Lit ``css`` tag."""
    body = strip_css_comments(css.replace("`", ""))
    return f"""import {{ css }} from 'lit';

export default css`{body}`;
"""


def tailwind_command(input_path: Path, content_path: Path, tailwind_config: Path | None = None) -> list[str]:
    command = [*TAILWIND_EXECUTABLE, "--input", str(input_path), "--content", str(content_path)]
    if tailwind_config is not None:
        command.extend(["--config", str(tailwind_config)])
    return command


def build_style_file(stylesheet: Path, config: SiroccoConfig, runner: CommandRunner) -> Path:
    """Compile one stylesheet and return the written ``.styles.ts`` path.

    Raises:
        StyleBuildError: If the Tailwind CLI exits non-zero.
    """
    source = stylesheet.read_text(encoding="utf-8")
    tailwind_config = config.tailwind_config if config.tailwind_config.is_file() else None

    with tempfile.TemporaryDirectory(prefix="sirocco-css-") as workdir:
        input_path = Path(workdir) / stylesheet.name
        input_path.write_text(f"{TAILWIND_PREAMBLE}{source}", encoding="utf-8")
        command = tailwind_command(input_path, component_module_path(stylesheet), tailwind_config)
        result = runner.run(command, cwd=config.local_path)

    if not result.ok:
        raise StyleBuildError(
            f"Tailwind failed for {stylesheet} (exit code {result.exit_code}): {result.stderr.strip()}"
        )

    output_path = styles_module_path(stylesheet)
    output_path.write_text(css_to_module(result.stdout), encoding="utf-8")
    logger.debug("Wrote %s", output_path)
    return output_path


def build_styles(config: SiroccoConfig, runner: CommandRunner) -> list[Path]:
    """Compile every stylesheet matching the configured pattern.

    Raises:
        StyleBuildError: If no stylesheet matches or any build fails.
    """
    stylesheets = find_style_files(config)
    logger.info("Found %d style files", len(stylesheets))
    if not stylesheets:
        raise StyleBuildError(f"No style files found matching {config.source_css}")
    return [build_style_file(stylesheet, config, runner) for stylesheet in stylesheets]


__all__ = [
    "TAILWIND_PREAMBLE",
    "build_style_file",
    "build_styles",
    "component_module_path",
    "css_to_module",
    "find_style_files",
    "strip_css_comments",
    "styles_module_path",
    "tailwind_command",
]
