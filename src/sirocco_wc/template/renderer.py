"""Placeholder substitution over a staged template tree.

Every token ``[NAME]`` is rewritten in place with its collected value. Values
are passed to :func:`re.sub` as the replacement verbatim, so backslash escapes
and group references inside a value are interpreted rather than inserted
literally. This is a known limitation.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePath
from typing import Iterable, Mapping

from sirocco_wc.core.constants import EXCLUDED_PREFIXES

logger = logging.getLogger(__name__)

# Non-UTF-8 bytes and line endings survive the read/write round trip unchanged
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def placeholder_token(name: str) -> str:
    return f"[{name.upper()}]"


def is_excluded(relative_path: PurePath, prefixes: Iterable[str] = EXCLUDED_PREFIXES) -> bool:
    """Return True if a staging-relative path starts with an excluded prefix."""
    posix = relative_path.as_posix()
    return any(posix.startswith(prefix) for prefix in prefixes)


def substitute_text(text: str, values: Mapping[str, str]) -> str:
    """Apply every value to *text*, in mapping order."""
    for name, value in values.items():
        text = re.sub(re.escape(placeholder_token(name)), value, text)
    return text


def eligible_files(staging_path: Path, prefixes: Iterable[str] = EXCLUDED_PREFIXES) -> list[Path]:
    """Regular files under *staging_path* that substitution applies to."""
    prefixes = tuple(prefixes)
    return [
        path
        for path in sorted(staging_path.rglob("*"))
        if path.is_file() and not is_excluded(path.relative_to(staging_path), prefixes)
    ]


def substitute_tree(staging_path: Path, values: Mapping[str, str]) -> list[Path]:
    """Rewrite every eligible staged file with the collected *values*.

    Returns:
        Files whose content changed.
    """
    rewritten: list[Path] = []
    for path in eligible_files(staging_path):
        logger.debug("Replacing %s", path.relative_to(staging_path))
        with path.open("r", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            original = handle.read()
        updated = substitute_text(original, values)
        if updated != original:
            with path.open("w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
                handle.write(updated)
            rewritten.append(path)
    return rewritten


__all__ = [
    "eligible_files",
    "is_excluded",
    "placeholder_token",
    "substitute_text",
    "substitute_tree",
]
