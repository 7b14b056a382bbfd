"""Core configuration, constants and process helpers for sirocco-wc."""

from .config import SiroccoConfig, load_config
from .process import CommandResult, CommandRunner, SubprocessRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "SiroccoConfig",
    "SubprocessRunner",
    "load_config",
]
