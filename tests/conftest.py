from __future__ import annotations

import io
from pathlib import Path
from textwrap import dedent

import pytest
from rich.console import Console

from sirocco_wc.core.config import CONFIG_KEYS, SiroccoConfig
from sirocco_wc.core.constants import TEMPLATE_ROOT_ENV_VAR
from tests.utils import write_tree


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for env_var, _ in CONFIG_KEYS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv(TEMPLATE_ROOT_ENV_VAR, raising=False)


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "myproj"
    path.mkdir()
    return path


@pytest.fixture()
def config(project_dir: Path) -> SiroccoConfig:
    return SiroccoConfig(local_path=project_dir, generator_version="9.9.9")


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=200)


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    """Two small template kinds laid out like the packaged ones."""
    root = tmp_path / "templates"
    write_tree(
        root / "default",
        {
            "_variables.yaml": dedent(
                """
                variables:
                  - name: Name
                    default_from: project_name
                  - name: Version
                    default: "1.0.0"
                  - name: Description
                """
            ),
            "_.gitignore": "node_modules/\n",
            ".editorconfig": "root = true\n",
            "README.md": "Name = [NAME]\n",
            "package.json": '{"name": "[NAME]", "version": "[VERSION]", "description": "[DESCRIPTION]"}\n',
            "src/main/ts/index.ts": "// [NAME] entrypoint\n",
            "node_modules/dep/index.js": "module.exports = '[NAME]';\n",
        },
    )
    write_tree(
        root / "showcase",
        {
            "_variables.yaml": dedent(
                """
                variables:
                  - name: Name
                    default_from: project_name
                  - name: Description
                    default: Showcase hello world app for sirocco-wc
                """
            ),
            "_.gitignore": "dist/\n",
            "index.html": "<title>[NAME]</title><p>[DESCRIPTION]</p>\n",
        },
    )
    return root
