from __future__ import annotations

from pathlib import Path

import pytest

from sirocco_wc.exceptions import TemplateNotFoundError
from sirocco_wc.template.catalog import TemplateKind
from sirocco_wc.template.manager import get_template_path, get_template_root, stage_template


def test_packaged_template_root_has_both_kinds() -> None:
    root = get_template_root()

    assert (root / "default" / "_variables.yaml").is_file()
    assert (root / "showcase" / "_variables.yaml").is_file()


def test_template_root_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIROCCO_TEMPLATE_ROOT", str(tmp_path))

    assert get_template_root() == tmp_path


def test_get_template_path(template_root: Path) -> None:
    assert get_template_path(TemplateKind.SHOWCASE, template_root) == template_root / "showcase"


def test_missing_template_kind(tmp_path: Path) -> None:
    with pytest.raises(TemplateNotFoundError) as excinfo:
        get_template_path(TemplateKind.DEFAULT, tmp_path)

    assert excinfo.value.kind == "default"
    assert excinfo.value.path == tmp_path / "default"


def test_stage_copies_everything_but_the_catalog(template_root: Path, tmp_path: Path) -> None:
    staging = tmp_path / "stage"

    staged = stage_template(template_root / "default", staging)

    assert (staging / ".editorconfig").is_file()
    assert (staging / "_.gitignore").is_file()
    assert (staging / "src/main/ts/index.ts").read_text(encoding="utf-8") == "// [NAME] entrypoint\n"
    assert not (staging / "_variables.yaml").exists()
    assert (template_root / "default" / "_variables.yaml").is_file()
    assert Path("node_modules/dep/index.js") in staged
    assert staged == sorted(staged)


def test_stage_into_existing_directory(template_root: Path, tmp_path: Path) -> None:
    staging = tmp_path / "stage"
    (staging / "src").mkdir(parents=True)
    (staging / "src" / "leftover.txt").write_text("old", encoding="utf-8")

    stage_template(template_root / "default", staging)

    assert (staging / "src" / "leftover.txt").exists()
    assert (staging / "src/main/ts/index.ts").exists()


def test_stage_missing_source(tmp_path: Path) -> None:
    with pytest.raises(TemplateNotFoundError):
        stage_template(tmp_path / "nope", tmp_path / "stage")
