"""Editor context endpoints.

The editor plugin pushes its state here so built-in variables
(FILENAME, SELECTION, CLIPBOARD, TASK, ...) can read it.
"""

from fastapi import APIRouter

from instaprompt.api.models import EditorContextModel
from instaprompt.editor import get_editor_state

router = APIRouter(prefix="/context")


@router.get("", response_model=EditorContextModel)
def get_context():
    """Get the current editor context."""
    return EditorContextModel.from_snapshot(get_editor_state().snapshot())


@router.put("", response_model=EditorContextModel)
def update_context(context: EditorContextModel):
    """Replace the editor context."""
    get_editor_state().update(context.to_snapshot())
    return EditorContextModel.from_snapshot(get_editor_state().snapshot())
