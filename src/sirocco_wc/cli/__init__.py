"""CLI layer for sirocco-wc."""

from .helpers import configure_logging, console, exit_with_error, get_config, show_banner

__all__ = ["configure_logging", "console", "exit_with_error", "get_config", "show_banner"]
