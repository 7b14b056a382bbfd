"""Interactive collection of template variable values."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

import typer

from sirocco_wc.template.catalog import TemplateVariable

logger = logging.getLogger(__name__)

PromptFn = Callable[[TemplateVariable], str]


def prompt_for_variable(variable: TemplateVariable) -> str:
    """Ask for one value on the terminal; an empty answer keeps the default."""
    return typer.prompt(
        variable.name,
        default=variable.default or "",
        show_default=bool(variable.default),
    )


def collect_values(
    variables: Iterable[TemplateVariable],
    prompt: PromptFn | None = None,
) -> Mapping[str, str]:
    """Collect a value for every variable, in catalog order.

    Blocks on each prompt. An empty answer resolves to the variable's default,
    or to the empty string when the variable has none.

    Returns:
        Read-only mapping of variable name to collected value.
    """
    ask = prompt or prompt_for_variable
    values: dict[str, str] = {}
    for variable in variables:
        answer = ask(variable)
        if answer is None or answer == "":
            answer = variable.default or ""
        values[variable.name] = str(answer)
        logger.debug("Collected %s=%r", variable.name, values[variable.name])
    return MappingProxyType(values)


__all__ = ["PromptFn", "collect_values", "prompt_for_variable"]
