from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from sirocco_wc.core.process import CommandResult

REPO_ROOT = Path(__file__).resolve().parents[1]


class FakeRunner:
    """Records commands and replays scripted results (success by default)."""

    def __init__(self, results: Iterable[CommandResult] = (), default: CommandResult | None = None):
        self.results = list(results)
        self.default = default or CommandResult(exit_code=0)
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [command for command, _ in self.calls]

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        input_text: str | None = None,
    ) -> CommandResult:
        self.calls.append((tuple(command), cwd))
        if self.results:
            return self.results.pop(0)
        return self.default


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root
