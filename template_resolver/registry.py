"""Resolver registry and built-in variable decorator.

This module provides the registry mapping variable names to resolvers.
A registry is a plain object: engines take one explicitly, and the
application shell keeps a process default available via get_registry().

Built-in variables are declared with the @builtin_variable decorator,
which captures metadata alongside an extractor that reads an EditorHost.
They become live resolvers once bound to a host with
register_builtin_resolvers() (see template_resolver.variables).
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core import EditorHost

logger = logging.getLogger(__name__)

# A resolver produces a value, or None when it cannot resolve
ResolveFunc = Callable[[], Awaitable[str | None]]

# Built-in extractors read ambient state from the editor host
Extractor = Callable[["EditorHost"], Awaitable[str | None]]


class Category(Enum):
    """Variable categories for organization and documentation."""

    DOCUMENT = auto()  # FILENAME, FILEPATH, SELECTION, LINE
    CLIPBOARD = auto()  # CLIPBOARD
    TASK = auto()  # TASK
    CUSTOM = auto()  # registered at runtime


# Category display metadata for UI
CATEGORY_DISPLAY = {
    Category.DOCUMENT: {"label": "Active Document", "icon": "📄"},
    Category.CLIPBOARD: {"label": "Clipboard", "icon": "📋"},
    Category.TASK: {"label": "Task", "icon": "✅"},
    Category.CUSTOM: {"label": "Custom", "icon": "🔧"},
}


@dataclass(frozen=True)
class Resolver:
    """A named capability that supplies a value for one placeholder."""

    name: str
    resolve: ResolveFunc
    category: Category = Category.CUSTOM
    description: str = ""


@dataclass(frozen=True)
class BuiltinDefinition:
    """Declaration of a built-in variable, not yet bound to a host."""

    name: str
    category: Category
    extractor: Extractor
    description: str = ""


class ResolverRegistry:
    """Mapping from variable name to resolver.

    Not thread-safe: mutate only between resolution calls.
    """

    def __init__(self) -> None:
        self._resolvers: dict[str, Resolver] = {}

    def register(self, resolver: Resolver) -> None:
        """Register a resolver, replacing any existing one with the same name."""
        if resolver.name in self._resolvers:
            logger.debug("[REGISTRY] Replacing resolver: %s", resolver.name)
        self._resolvers[resolver.name] = resolver

    def unregister(self, name: str) -> None:
        """Remove a resolver. Unknown names are ignored."""
        if self._resolvers.pop(name, None) is not None:
            logger.debug("[REGISTRY] Unregistered resolver: %s", name)

    def get(self, name: str) -> Resolver | None:
        """Get a resolver by variable name."""
        return self._resolvers.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._resolvers

    def names(self) -> list[str]:
        """Get registered variable names in registration order."""
        return list(self._resolvers)

    def all_resolvers(self) -> list[Resolver]:
        """Get all registered resolvers."""
        return list(self._resolvers.values())

    def count(self) -> int:
        """Get total number of registered resolvers."""
        return len(self._resolvers)

    def clear(self) -> None:
        """Clear all registered resolvers (for testing)."""
        self._resolvers.clear()

    def to_api_format(self) -> dict:
        """Generate the API response format for the /api/variables endpoint."""
        variables_list = []
        categories_seen = set()

        for resolver in self._resolvers.values():
            cat_info = CATEGORY_DISPLAY.get(
                resolver.category,
                {"label": resolver.category.name.title(), "icon": "📋"},
            )
            category_name = f"{cat_info['icon']} {cat_info['label']}"
            categories_seen.add(category_name)

            variables_list.append(
                {
                    "name": resolver.name,
                    "placeholder": f"{{{resolver.name}}}",
                    "description": resolver.description,
                    "category": category_name,
                    "icon": cat_info["icon"],
                }
            )

        # Sort by category then name for consistent output
        variables_list.sort(key=lambda v: (v["category"], v["name"]))

        return {
            "total_variables": len(variables_list),
            "categories": sorted(categories_seen),
            "variables": variables_list,
        }


# Declared built-ins, keyed by name
_builtins: dict[str, BuiltinDefinition] = {}

_default_registry = ResolverRegistry()


def builtin_variable(
    name: str,
    category: Category,
    description: str = "",
) -> Callable[[Extractor], Extractor]:
    """Decorator to declare a built-in variable extractor.

    Usage:
        @builtin_variable(
            name="FILENAME",
            category=Category.DOCUMENT,
            description="Base name of the active document",
        )
        async def extract_filename(host: EditorHost) -> str | None:
            document = host.active_document()
            if document is None:
                return None
            return base_name(document.path)
    """

    def decorator(func: Extractor) -> Extractor:
        _builtins[name] = BuiltinDefinition(
            name=name,
            category=category,
            extractor=func,
            description=description,
        )
        return func

    return decorator


def get_builtins() -> list[BuiltinDefinition]:
    """Get all declared built-in variables."""
    return list(_builtins.values())


def get_registry() -> ResolverRegistry:
    """Get the process default registry."""
    return _default_registry
