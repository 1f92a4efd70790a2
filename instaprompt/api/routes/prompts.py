"""Prompts API endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from instaprompt.api.models import (
    PromptCreate,
    PromptResponse,
    PromptUpdate,
    PromptVariablesResponse,
    ResolveRequest,
    ResolveResponse,
)
from instaprompt.api.routes.resolve import resolve_content
from instaprompt.database import get_db
from instaprompt.database import prompts as prompt_db
from template_resolver import get_registry, parse_variables

router = APIRouter()


def _get_or_404(prompt_id: str):
    with get_db() as conn:
        prompt = prompt_db.get_prompt(conn, prompt_id)
    if prompt is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")
    return prompt


@router.get("/prompts", response_model=list[PromptResponse])
def list_prompts(category: str | None = Query(None, description="Filter by category")):
    """List saved prompts in creation order."""
    with get_db() as conn:
        prompts = prompt_db.list_prompts(conn, category=category)
    return [PromptResponse.from_prompt(p) for p in prompts]


@router.post("/prompts", response_model=PromptResponse, status_code=status.HTTP_201_CREATED)
def create_prompt(prompt: PromptCreate):
    """Create a new prompt."""
    with get_db() as conn:
        created = prompt_db.create_prompt(
            conn,
            name=prompt.name,
            content=prompt.content,
            category=prompt.category,
        )
    return PromptResponse.from_prompt(created)


@router.get("/prompts/{prompt_id}", response_model=PromptResponse)
def get_prompt(prompt_id: str):
    """Get a prompt by ID."""
    return PromptResponse.from_prompt(_get_or_404(prompt_id))


@router.put("/prompts/{prompt_id}", response_model=PromptResponse)
def update_prompt(prompt_id: str, update: PromptUpdate):
    """Update a prompt."""
    fields = {k: v for k, v in update.model_dump().items() if v is not None and v is not False}
    if not fields:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")

    with get_db() as conn:
        updated = prompt_db.update_prompt(
            conn,
            prompt_id,
            name=update.name,
            content=update.content,
            category=update.category,
            clear_category=update.clear_category,
        )
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")
    return PromptResponse.from_prompt(updated)


@router.delete("/prompts/{prompt_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_prompt(prompt_id: str):
    """Delete a prompt."""
    with get_db() as conn:
        deleted = prompt_db.delete_prompt(conn, prompt_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")


@router.get("/prompts/{prompt_id}/variables", response_model=PromptVariablesResponse)
def get_prompt_variables(prompt_id: str):
    """List the variables a prompt references and which need manual input."""
    prompt = _get_or_404(prompt_id)
    registry = get_registry()
    variables = parse_variables(prompt.content)
    return PromptVariablesResponse(
        variables=variables,
        resolvable=[v for v in variables if v in registry],
        manual=[v for v in variables if v not in registry],
    )


@router.post("/prompts/{prompt_id}/resolve", response_model=ResolveResponse)
async def resolve_prompt(prompt_id: str, request: ResolveRequest):
    """Resolve a stored prompt against the editor context.

    Returns 422 with the variable name when a value is missing.
    """
    prompt = _get_or_404(prompt_id)
    return await resolve_content(prompt.content, request)
