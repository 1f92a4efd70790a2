"""Template resolution endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from instaprompt.api.models import ResolveRequest, ResolveResponse, TemplateResolveRequest
from instaprompt.editor import get_editor_state
from template_resolver import (
    TemplateResolver,
    VariableResolutionCancelled,
    get_registry,
    mapping_fallback,
    parse_variables,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def resolve_content(content: str, request: ResolveRequest) -> ResolveResponse:
    """Resolve template text for an API request.

    Raises:
        HTTPException: 422 naming the variable that could not be resolved
    """
    if request.context is not None:
        get_editor_state().update(request.context.to_snapshot())

    resolver = TemplateResolver(get_registry())
    try:
        resolved = await resolver.resolve(content, mapping_fallback(request.variables))
    except VariableResolutionCancelled as e:
        logger.info("[API] Resolution cancelled: no value for %s", e.variable_name)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(e), "variable": e.variable_name},
        ) from None

    return ResolveResponse(content=resolved, variables=parse_variables(content))


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_template(request: TemplateResolveRequest):
    """Resolve an ad-hoc template."""
    return await resolve_content(request.template, request)
