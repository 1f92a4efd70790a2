"""Template resolution engine.

Resolves every variable a template references, then substitutes the
values back in. Resolution is all-or-nothing: if any variable cannot be
resolved the call raises VariableResolutionCancelled and nothing is
substituted.

Resolvers and the fallback handler are awaited one at a time, in the
order variables first appear in the template, so interactive prompts
show up in reading order.
"""

import logging
from collections.abc import Awaitable, Callable

from template_resolver.parser import parse_variables, substitute
from template_resolver.registry import ResolverRegistry, get_registry

logger = logging.getLogger(__name__)

# Supplies a value for a variable no resolver could handle; None means cancelled
UnresolvedVariableHandler = Callable[[str], Awaitable[str | None]]


class VariableResolutionCancelled(Exception):
    """No value could be obtained for a variable.

    Usually a deliberate user dismissal rather than an application error.
    """

    def __init__(self, variable_name: str):
        super().__init__(f"Variable resolution cancelled for: {variable_name}")
        self.variable_name = variable_name


class TemplateResolver:
    """Resolves {NAME} placeholders using a resolver registry.

    Usage:
        registry = ResolverRegistry()
        register_builtin_resolvers(registry, host)

        resolver = TemplateResolver(registry)
        text = await resolver.resolve("Review {FILENAME}", prompt_for_variable)
    """

    def __init__(self, registry: ResolverRegistry | None = None):
        self._registry = registry if registry is not None else get_registry()

    @property
    def registry(self) -> ResolverRegistry:
        return self._registry

    async def resolve(
        self,
        template: str,
        on_unresolved: UnresolvedVariableHandler | None = None,
    ) -> str:
        """Resolve all variables in a template.

        Args:
            template: Template text with {NAME} placeholders
            on_unresolved: Optional fallback for variables no resolver handled

        Returns:
            Template with every placeholder replaced

        Raises:
            VariableResolutionCancelled: If a variable could not be resolved
        """
        variable_names = parse_variables(template)
        if not variable_names:
            return template

        values: dict[str, str] = {}
        for name in variable_names:
            value = await self._resolve_variable(name, on_unresolved)
            if value is None:
                logger.debug("[RESOLVER] Resolution cancelled at %s", name)
                raise VariableResolutionCancelled(name)
            values[name] = value

        logger.debug("[RESOLVER] Resolved %d variables", len(values))
        return substitute(template, values)

    async def _resolve_variable(
        self,
        name: str,
        on_unresolved: UnresolvedVariableHandler | None,
    ) -> str | None:
        """Get one variable's value from its resolver, else the fallback."""
        value = None

        resolver = self._registry.get(name)
        if resolver is not None:
            value = await resolver.resolve()

        if value is None and on_unresolved is not None:
            value = await on_unresolved(name)

        return value


async def resolve(
    template: str,
    on_unresolved: UnresolvedVariableHandler | None = None,
    registry: ResolverRegistry | None = None,
) -> str:
    """Resolve a template (convenience wrapper around TemplateResolver)."""
    return await TemplateResolver(registry).resolve(template, on_unresolved)
