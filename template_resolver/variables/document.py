"""Active document variables: file name, path, selection, cursor line.

All of these resolve to None when no document has focus.
"""

import re

from core import EditorHost
from template_resolver.registry import Category, builtin_variable

PATH_SEPARATOR_PATTERN = re.compile(r"[/\\]")


def base_name(path: str) -> str:
    """Last path component, splitting on both / and \\ separators."""
    return PATH_SEPARATOR_PATTERN.split(path)[-1]


@builtin_variable(
    name="FILENAME",
    category=Category.DOCUMENT,
    description="Base name of the active document (e.g., 'main.py')",
)
async def extract_filename(host: EditorHost) -> str | None:
    document = host.active_document()
    if document is None:
        return None
    return base_name(document.path)


@builtin_variable(
    name="FILEPATH",
    category=Category.DOCUMENT,
    description="Absolute path of the active document",
)
async def extract_filepath(host: EditorHost) -> str | None:
    document = host.active_document()
    if document is None:
        return None
    return document.path


@builtin_variable(
    name="SELECTION",
    category=Category.DOCUMENT,
    description="Currently selected text (empty when nothing is selected)",
)
async def extract_selection(host: EditorHost) -> str | None:
    document = host.active_document()
    if document is None:
        return None
    # Empty selection is still a value
    return document.selection


@builtin_variable(
    name="LINE",
    category=Category.DOCUMENT,
    description="Current cursor line, 1-indexed (e.g., '42')",
)
async def extract_line(host: EditorHost) -> str | None:
    document = host.active_document()
    if document is None:
        return None
    return str(document.cursor_line + 1)
