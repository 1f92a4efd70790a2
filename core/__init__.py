"""Core types and interfaces for InstaPrompt.

All data structures are dataclasses with attribute access.
Editor integrations implement the EditorHost interface.
"""

from core.interfaces import EditorHost
from core.types import Document, EditorSnapshot, Prompt

__all__ = [
    # Types
    "Document",
    "EditorSnapshot",
    "Prompt",
    # Interfaces
    "EditorHost",
]
