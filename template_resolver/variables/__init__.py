"""Built-in template variables.

Each module in this package declares variables using the
@builtin_variable decorator. Variables are organized by category:

- document: FILENAME, FILEPATH, SELECTION, LINE
- clipboard: CLIPBOARD
- task: TASK

Declarations are inert until bound to an editor host with
register_builtin_resolvers().
"""

import logging
from functools import partial

from core import EditorHost
from template_resolver.registry import (
    Resolver,
    ResolverRegistry,
    get_builtins,
)

# Import all variable modules to trigger declaration (noqa: F401 for side-effect imports)
from template_resolver.variables import (  # noqa: F401
    clipboard,
    document,
    task,
)
from template_resolver.variables.task import DEFAULT_TASK_DIRECTORY, task_directory_pattern

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_TASK_DIRECTORY", "register_builtin_resolvers"]


def register_builtin_resolvers(
    registry: ResolverRegistry,
    host: EditorHost,
    task_directory: str = DEFAULT_TASK_DIRECTORY,
) -> None:
    """Register every built-in variable, reading context from host.

    Existing resolvers with the same names are replaced.

    Args:
        registry: Registry to populate
        host: Editor host the resolvers read from
        task_directory: Folder (relative, / or \\ separated) holding task documents

    Raises:
        ValueError: If task_directory names no folder.
    """
    options = {"TASK": {"directory_pattern": task_directory_pattern(task_directory)}}

    for definition in get_builtins():
        registry.register(
            Resolver(
                name=definition.name,
                resolve=partial(definition.extractor, host, **options.get(definition.name, {})),
                category=definition.category,
                description=definition.description,
            )
        )
    logger.debug("[REGISTRY] Registered %d built-in resolvers", len(get_builtins()))
