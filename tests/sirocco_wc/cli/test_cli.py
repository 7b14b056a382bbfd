from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import sirocco_wc
from sirocco_wc import app
from sirocco_wc.cli import helpers
from sirocco_wc.core.process import CommandResult
from tests.utils import FakeRunner, write_tree

init_module = importlib.import_module("sirocco_wc.cli.commands.init")
add_module = importlib.import_module("sirocco_wc.cli.commands.add")
styles_module = importlib.import_module("sirocco_wc.cli.commands.styles")

runner = CliRunner()
ACCEPT_ALL_DEFAULTS = "\n" * 11


@pytest.fixture()
def cli_project(project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(project_dir)
    monkeypatch.setattr(helpers.console, "_width", 400)
    return project_dir


def fake_runner_factory(monkeypatch: pytest.MonkeyPatch, module, fake: FakeRunner) -> None:
    monkeypatch.setattr(module, "SubprocessRunner", lambda *args, **kwargs: fake)


def test_banner_without_subcommand(cli_project: Path) -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert helpers.TAGLINE in result.output


def test_version(cli_project: Path) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert sirocco_wc.__version__ in result.output


def test_init_without_install(cli_project: Path) -> None:
    result = runner.invoke(app, ["init", "--no-install"], input=ACCEPT_ALL_DEFAULTS)

    assert result.exit_code == 0, result.output
    assert "Using 'default' template..." in result.output
    assert "Success!" in result.output
    package = json.loads((cli_project / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "myproj"
    assert (cli_project / ".gitignore").exists()
    assert not (cli_project / "tmp").exists()


def test_init_runs_setup_steps(cli_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeRunner()
    fake_runner_factory(monkeypatch, init_module, fake)

    result = runner.invoke(app, ["init", "--template", "showcase"], input=ACCEPT_ALL_DEFAULTS)

    assert result.exit_code == 0, result.output
    assert fake.commands[0] == ("yarn", "set", "version", "4.10.3")
    assert len(fake.commands) == 5
    assert "update the index.html" in result.output
    assert (cli_project / "src/main/ts/views/App/App.ts").exists()


def test_init_setup_failure(cli_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeRunner([CommandResult(1, stderr="registry unreachable")])
    fake_runner_factory(monkeypatch, init_module, fake)

    result = runner.invoke(app, ["init"], input=ACCEPT_ALL_DEFAULTS)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "registry unreachable" in result.output
    assert len(fake.commands) == 1
    assert (cli_project / "package.json").exists()


def test_init_unknown_template(cli_project: Path) -> None:
    result = runner.invoke(app, ["init", "--template", "fancy"])

    assert result.exit_code == 2


def test_init_missing_template_root(cli_project: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIROCCO_TEMPLATE_ROOT", str(tmp_path / "nowhere"))

    result = runner.invoke(app, ["init", "--no-install"])

    assert result.exit_code == 1
    assert "Template 'default' not found" in result.output


def test_init_aborted_prompt_keeps_staging(cli_project: Path) -> None:
    result = runner.invoke(app, ["init", "--no-install"], input="\n\n")

    assert result.exit_code != 0
    assert (cli_project / "tmp" / "package.json").exists()
    assert not (cli_project / "package.json").exists()


def test_init_bad_substitution_value(cli_project: Path) -> None:
    result = runner.invoke(app, ["init", "--no-install"], input="\\1\n" + "\n" * 10)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "Partial output left in" in result.output


def test_init_windows_path_in_answer_aborts(cli_project: Path) -> None:
    answers = "\n\nLives in C:\\dev\\widgets\n" + "\n" * 8

    result = runner.invoke(app, ["init", "--no-install"], input=answers)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert (cli_project / "tmp").exists()
    assert not (cli_project / "package.json").exists()


def test_add_component_and_build(cli_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeRunner(default=CommandResult(0, stdout=".p-4{padding:1rem}"))
    fake_runner_factory(monkeypatch, add_module, fake)

    result = runner.invoke(app, ["add", "card", "--type", "widgets"])

    assert result.exit_code == 0, result.output
    component_dir = cli_project / "src/main/ts/widgets/card"
    assert (component_dir / "Card.ts").exists()
    assert "padding:1rem" in (component_dir / "Card.styles.ts").read_text(encoding="utf-8")
    assert "Finished to create card" in result.output
    assert len(fake.commands) == 1


def test_add_uses_environment_prefix(cli_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SWC_PREFIX", "acme-")
    fake_runner_factory(monkeypatch, add_module, FakeRunner())

    result = runner.invoke(app, ["add", "hero"])

    assert result.exit_code == 0, result.output
    module = (cli_project / "src/main/ts/components/hero/Hero.ts").read_text(encoding="utf-8")
    assert "@customElement('acme-hero')" in module


def test_build_css_without_stylesheets(cli_project: Path) -> None:
    result = runner.invoke(app, ["buildCss"])

    assert result.exit_code == 1
    assert "No style files found" in result.output


def test_build_css(cli_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_tree(cli_project, {"src/main/ts/components/card/Card.css": "", "src/main/ts/components/card/Card.ts": ""})
    fake_runner_factory(monkeypatch, styles_module, FakeRunner(default=CommandResult(0, stdout=".a{}")))

    result = runner.invoke(app, ["buildCss"])

    assert result.exit_code == 0, result.output
    assert "Found 1 style files" in result.output
    assert (cli_project / "src/main/ts/components/card/Card.styles.ts").exists()


def test_build_css_tailwind_failure(cli_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_tree(cli_project, {"src/main/ts/components/card/Card.css": ""})
    fake_runner_factory(monkeypatch, styles_module, FakeRunner(default=CommandResult(127, stderr="npx not found")))

    result = runner.invoke(app, ["buildCss"])

    assert result.exit_code == 1
    assert "npx not found" in result.output


def test_watch_css_stops_on_interrupt(cli_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[float] = []

    def fake_run(self, stop_event=None) -> None:
        seen.append(self.interval)
        raise KeyboardInterrupt

    monkeypatch.setattr(styles_module.StyleWatcher, "run", fake_run)

    result = runner.invoke(app, ["watchCss", "--interval", "2"])

    assert result.exit_code == 0, result.output
    assert seen == [2.0]
    assert "Stopped watching" in result.output


def test_invalid_project_file(cli_project: Path) -> None:
    (cli_project / ".sirocco.yaml").write_text("- not\n- a mapping\n", encoding="utf-8")

    result = runner.invoke(app, ["buildCss"])

    assert result.exit_code == 1
    assert "must contain a mapping" in result.output


def test_help_lists_commands(cli_project: Path) -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("init", "add", "buildCss", "watchCss"):
        assert command in result.output
