"""Shared fixtures for the InstaPrompt test suite."""

import sqlite3

import pytest

from core import Document, EditorSnapshot
from instaprompt.config import reset_config_cache
from instaprompt.database import init_schema
from instaprompt.editor import EditorState, get_editor_state
from template_resolver import Resolver, ResolverRegistry, get_registry


class CountingResolver:
    """Resolver callable that records how often it was invoked."""

    def __init__(self, value: str | None):
        self.value = value
        self.calls = 0

    async def __call__(self) -> str | None:
        self.calls += 1
        return self.value


class RecordingFallback:
    """Fallback handler answering from a dict and recording requested names."""

    def __init__(self, values: dict[str, str] | None = None):
        self.values = values or {}
        self.requested: list[str] = []

    async def __call__(self, variable_name: str) -> str | None:
        self.requested.append(variable_name)
        return self.values.get(variable_name)


def make_resolver(name: str, value: str | None) -> tuple[Resolver, CountingResolver]:
    """Create a Resolver plus the counter behind it."""
    counter = CountingResolver(value)
    return Resolver(name=name, resolve=counter), counter


@pytest.fixture
def registry():
    """Fresh, empty resolver registry."""
    return ResolverRegistry()


@pytest.fixture
def conn():
    """In-memory SQLite database with the prompt schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    init_schema(db)
    yield db
    db.close()


@pytest.fixture
def editor():
    """Editor state with main.py active and a task document visible."""
    active = Document(path="/work/app/src/main.py", selection="def main():", cursor_line=9)
    task_doc = Document(path="/work/app/docs/delivery/4/4-2.md")
    return EditorState(
        EditorSnapshot(active=active, visible=(active, task_doc), clipboard="copied text")
    )


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """Point configuration at a temporary database and reset global state."""
    monkeypatch.setenv("INSTAPROMPT_DB_PATH", str(tmp_path / "instaprompt.db"))
    reset_config_cache()
    get_registry().clear()
    get_editor_state().clear()
    yield tmp_path
    get_registry().clear()
    get_editor_state().clear()
    reset_config_cache()
