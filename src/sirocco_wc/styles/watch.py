"""Polling watcher that keeps ``.styles.ts`` modules in sync."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from rich.console import Console

from sirocco_wc.core.config import SiroccoConfig
from sirocco_wc.exceptions import SiroccoError
from sirocco_wc.styles.build import component_module_path, find_style_files

logger = logging.getLogger(__name__)

BuildFn = Callable[[Path], Path]


def _mtime(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


class StyleWatcher:
    """Rebuild a stylesheet when it, or its sibling ``.ts`` file, changes.

    Stylesheets seen for the first time are only registered; the first poll
    therefore never builds anything.
    """

    def __init__(
        self,
        config: SiroccoConfig,
        build: BuildFn,
        interval: float = 0.5,
        console: Console | None = None,
    ):
        self.config = config
        self.build = build
        self.interval = interval
        self.console = console or Console()
        self._tracked: dict[Path, tuple[int | None, int | None]] = {}

    @property
    def tracked(self) -> list[Path]:
        return sorted(self._tracked)

    def poll(self) -> list[Path]:
        """Scan once and rebuild whatever changed since the previous scan."""
        rebuilt: list[Path] = []
        current = find_style_files(self.config)

        for stylesheet in current:
            module = component_module_path(stylesheet)
            stamps = (_mtime(stylesheet), _mtime(module))
            previous = self._tracked.get(stylesheet)
            self._tracked[stylesheet] = stamps

            if previous is None:
                self.console.print(f"add watch file: {module}")
                continue
            if stamps[0] != previous[0]:
                self.console.print(f"change css: {stylesheet}")
            elif previous[1] is not None and stamps[1] != previous[1]:
                self.console.print(f"change ts: {module}")
            else:
                continue
            if self._rebuild(stylesheet):
                rebuilt.append(stylesheet)

        for gone in set(self._tracked) - set(current):
            logger.debug("Stopped watching %s", gone)
            del self._tracked[gone]
        return rebuilt

    def _rebuild(self, stylesheet: Path) -> bool:
        try:
            self.build(stylesheet)
        except (SiroccoError, OSError) as exc:
            logger.error("Rebuilding %s failed: %s", stylesheet, exc)
            self.console.print(f"[red]Error:[/red] {exc}")
            return False
        return True

    def run(self, stop_event: threading.Event | None = None) -> None:
        """Poll until *stop_event* is set (or forever when it is None)."""
        stop = stop_event or threading.Event()
        self.poll()
        while not stop.wait(self.interval):
            self.poll()


__all__ = ["StyleWatcher"]
