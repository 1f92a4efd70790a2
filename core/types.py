"""Core data types for InstaPrompt.

All data structures are frozen dataclasses with attribute access.
Timestamps are Unix epoch milliseconds.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Prompt:
    """A saved prompt template."""

    id: str
    name: str
    content: str
    created_at: int
    updated_at: int
    category: str | None = None


@dataclass(frozen=True)
class Document:
    """An open document as reported by the editor.

    cursor_line is 0-indexed, the way editors report positions.
    """

    path: str
    selection: str = ""
    cursor_line: int = 0


@dataclass(frozen=True)
class EditorSnapshot:
    """Point-in-time view of the user's editing context."""

    active: Document | None = None
    visible: tuple[Document, ...] = field(default_factory=tuple)
    clipboard: str = ""
