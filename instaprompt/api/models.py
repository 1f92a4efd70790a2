"""Pydantic models for API request/response validation."""

from pydantic import BaseModel, Field

from core import Document, EditorSnapshot, Prompt

# =============================================================================
# PROMPTS
# =============================================================================


class PromptCreate(BaseModel):
    """Create prompt request."""

    name: str = Field(min_length=1)
    content: str
    category: str | None = None


class PromptUpdate(BaseModel):
    """Update prompt request. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    content: str | None = None
    category: str | None = None
    clear_category: bool = False


class PromptResponse(BaseModel):
    """Saved prompt."""

    id: str
    name: str
    content: str
    category: str | None = None
    created_at: int  # Unix epoch milliseconds
    updated_at: int

    @classmethod
    def from_prompt(cls, prompt: Prompt) -> "PromptResponse":
        return cls(
            id=prompt.id,
            name=prompt.name,
            content=prompt.content,
            category=prompt.category,
            created_at=prompt.created_at,
            updated_at=prompt.updated_at,
        )


class PromptVariablesResponse(BaseModel):
    """Variables referenced by a prompt."""

    variables: list[str]
    resolvable: list[str]  # have a registered resolver
    manual: list[str]  # need a value from the user


# =============================================================================
# EDITOR CONTEXT
# =============================================================================


class DocumentModel(BaseModel):
    """An open document."""

    path: str
    selection: str = ""
    cursor_line: int = Field(default=0, ge=0)  # 0-indexed

    def to_document(self) -> Document:
        return Document(path=self.path, selection=self.selection, cursor_line=self.cursor_line)

    @classmethod
    def from_document(cls, document: Document) -> "DocumentModel":
        return cls(
            path=document.path,
            selection=document.selection,
            cursor_line=document.cursor_line,
        )


class EditorContextModel(BaseModel):
    """Snapshot of the editor state."""

    active: DocumentModel | None = None
    visible: list[DocumentModel] = Field(default_factory=list)
    clipboard: str = ""

    def to_snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(
            active=self.active.to_document() if self.active else None,
            visible=tuple(d.to_document() for d in self.visible),
            clipboard=self.clipboard,
        )

    @classmethod
    def from_snapshot(cls, snapshot: EditorSnapshot) -> "EditorContextModel":
        return cls(
            active=DocumentModel.from_document(snapshot.active) if snapshot.active else None,
            visible=[DocumentModel.from_document(d) for d in snapshot.visible],
            clipboard=snapshot.clipboard,
        )


# =============================================================================
# RESOLUTION
# =============================================================================


class ResolveRequest(BaseModel):
    """Resolve a stored prompt.

    variables answer placeholders no resolver could fill; context, when
    given, replaces the editor state before resolving.
    """

    variables: dict[str, str] = Field(default_factory=dict)
    context: EditorContextModel | None = None


class TemplateResolveRequest(ResolveRequest):
    """Resolve an ad-hoc template."""

    template: str


class ResolveResponse(BaseModel):
    """Resolved prompt text."""

    content: str
    variables: list[str]


class StaticResolverRequest(BaseModel):
    """Register a resolver that always returns the same value."""

    value: str
    description: str = ""
