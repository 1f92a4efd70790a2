"""Editor context holder.

The editor plugin pushes snapshots of its state (active document,
selection, clipboard, visible documents); the built-in resolvers read
them through the EditorHost interface.
"""

import logging

from core import Document, EditorSnapshot

logger = logging.getLogger(__name__)


class EditorState:
    """EditorHost backed by the most recently pushed snapshot."""

    def __init__(self, snapshot: EditorSnapshot | None = None):
        self._snapshot = snapshot or EditorSnapshot()

    def snapshot(self) -> EditorSnapshot:
        """Get the current snapshot."""
        return self._snapshot

    def update(self, snapshot: EditorSnapshot) -> None:
        """Replace the current snapshot."""
        self._snapshot = snapshot
        logger.debug(
            "[EDITOR] Context updated: active=%s visible=%d",
            snapshot.active.path if snapshot.active else None,
            len(snapshot.visible),
        )

    def clear(self) -> None:
        """Forget all editor context."""
        self._snapshot = EditorSnapshot()

    # EditorHost

    def active_document(self) -> Document | None:
        return self._snapshot.active

    def visible_documents(self) -> list[Document]:
        """Visible documents, always including the active one (listed first if added)."""
        visible = list(self._snapshot.visible)
        active = self._snapshot.active
        if active is not None and all(d.path != active.path for d in visible):
            visible.insert(0, active)
        return visible

    async def read_clipboard(self) -> str:
        return self._snapshot.clipboard


_editor_state = EditorState()


def get_editor_state() -> EditorState:
    """Get the process-wide editor state."""
    return _editor_state
