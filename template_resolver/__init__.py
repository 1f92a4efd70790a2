"""Template Variable Resolution Engine.

Finds {NAME} placeholders in prompt text and fills them in from
registered resolvers, falling back to a caller-supplied handler.

Usage:
    from template_resolver import (
        ResolverRegistry,
        TemplateResolver,
        register_builtin_resolvers,
    )

    registry = ResolverRegistry()
    register_builtin_resolvers(registry, editor_host)

    resolver = TemplateResolver(registry)
    result = await resolver.resolve("Explain {SELECTION} in {FILENAME}", fallback)

Resolution is all-or-nothing: a variable nobody can supply raises
VariableResolutionCancelled carrying its name.
"""

from template_resolver.fallbacks import mapping_fallback, prompt_for_variable
from template_resolver.parser import VARIABLE_PATTERN, parse_variables, substitute
from template_resolver.registry import (
    Category,
    Resolver,
    ResolverRegistry,
    builtin_variable,
    get_registry,
)
from template_resolver.resolver import (
    TemplateResolver,
    UnresolvedVariableHandler,
    VariableResolutionCancelled,
    resolve,
)
from template_resolver.variables import DEFAULT_TASK_DIRECTORY, register_builtin_resolvers

__all__ = [
    # Main API
    "TemplateResolver",
    "VariableResolutionCancelled",
    "UnresolvedVariableHandler",
    "resolve",
    # Parsing
    "VARIABLE_PATTERN",
    "parse_variables",
    "substitute",
    # Registry
    "Category",
    "Resolver",
    "ResolverRegistry",
    "builtin_variable",
    "get_registry",
    "register_builtin_resolvers",
    "DEFAULT_TASK_DIRECTORY",
    # Fallbacks
    "mapping_fallback",
    "prompt_for_variable",
]
