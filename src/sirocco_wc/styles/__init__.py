"""Tailwind stylesheet compilation for sirocco-wc components."""

from .build import build_style_file, build_styles, css_to_module, find_style_files
from .watch import StyleWatcher

__all__ = [
    "StyleWatcher",
    "build_style_file",
    "build_styles",
    "css_to_module",
    "find_style_files",
]
