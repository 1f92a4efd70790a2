"""Fallback handlers for variables no resolver could supply."""

import asyncio
from collections.abc import Mapping

from template_resolver.resolver import UnresolvedVariableHandler


def mapping_fallback(values: Mapping[str, str]) -> UnresolvedVariableHandler:
    """Build a handler that answers from a fixed mapping.

    Names missing from the mapping are treated as cancelled.
    """

    async def handler(variable_name: str) -> str | None:
        return values.get(variable_name)

    return handler


async def prompt_for_variable(variable_name: str) -> str | None:
    """Ask for a value on the console.

    An empty answer is a valid value. End of input (Ctrl-D) cancels.
    """
    try:
        return await asyncio.to_thread(input, f"Enter value for {{{variable_name}}}: ")
    except EOFError:
        return None
