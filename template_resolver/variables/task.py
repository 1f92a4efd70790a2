"""Task variable: id of the open task document.

Task documents live under a task directory (default docs/delivery) and
are named <digits>-<digits>.md, e.g. docs/delivery/12/12-3.md resolves
to '12-3'. The directory is chosen when the built-ins are registered.
"""

import re
from re import Pattern

from core import Document, EditorHost
from template_resolver.registry import Category, builtin_variable
from template_resolver.variables.document import base_name

DEFAULT_TASK_DIRECTORY = "docs/delivery"

TASK_FILE_PATTERN = re.compile(r"^(\d+-\d+)\.md$")


def task_directory_pattern(task_directory: str) -> Pattern[str]:
    """Match the task directory as a path segment run, with either separator.

    Raises:
        ValueError: If task_directory has no path segments (e.g. "/").
    """
    segments = [re.escape(s) for s in re.split(r"[/\\]+", task_directory) if s]
    if not segments:
        raise ValueError(f"Task directory must name at least one folder, got {task_directory!r}")
    return re.compile(r"[/\\]" + r"[/\\]".join(segments) + r"[/\\]")


DEFAULT_DIRECTORY_PATTERN = task_directory_pattern(DEFAULT_TASK_DIRECTORY)


def _task_id(document: Document, directory_pattern: Pattern[str]) -> str | None:
    """Get the task id for a document, or None if it is not a task document."""
    if not directory_pattern.search(document.path):
        return None
    match = TASK_FILE_PATTERN.match(base_name(document.path))
    return match.group(1) if match else None


@builtin_variable(
    name="TASK",
    category=Category.TASK,
    description="Task id from an open task document (e.g., '1-3')",
)
async def extract_task(
    host: EditorHost, directory_pattern: Pattern[str] = DEFAULT_DIRECTORY_PATTERN
) -> str | None:
    matches: list[tuple[Document, str]] = []
    for document in host.visible_documents():
        task_id = _task_id(document, directory_pattern)
        if task_id is not None:
            matches.append((document, task_id))

    if not matches:
        return None

    # Prefer the active document when it is one of the matches
    active = host.active_document()
    if active is not None:
        for document, task_id in matches:
            if document.path == active.path:
                return task_id

    return matches[0][1]
