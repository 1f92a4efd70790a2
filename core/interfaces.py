"""Interfaces implemented outside the resolution core."""

from typing import Protocol, runtime_checkable

from core.types import Document


@runtime_checkable
class EditorHost(Protocol):
    """Source of ambient editing context for the built-in resolvers.

    Implementations only report state; resolvers never mutate it.
    """

    def active_document(self) -> Document | None:
        """Document that currently has focus, if any."""
        ...

    def visible_documents(self) -> list[Document]:
        """Documents currently visible, in the host's own order."""
        ...

    async def read_clipboard(self) -> str:
        """Current clipboard text (empty string when empty)."""
        ...
