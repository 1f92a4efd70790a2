"""Template variable registry endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from instaprompt.api.models import StaticResolverRequest
from template_resolver import VARIABLE_PATTERN, Category, Resolver, get_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/variables")


@router.get("")
def list_variables() -> dict:
    """List registered variables grouped for the prompt editor."""
    return get_registry().to_api_format()


@router.put("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def register_static_variable(name: str, request: StaticResolverRequest):
    """Register a variable that always resolves to the given value.

    Replaces any existing resolver with the same name, built-ins included.
    """
    if not VARIABLE_PATTERN.fullmatch(f"{{{name}}}"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Variable names may only contain A-Z and underscore",
        )

    value = request.value

    async def resolve_static() -> str:
        return value

    get_registry().register(
        Resolver(
            name=name,
            resolve=resolve_static,
            category=Category.CUSTOM,
            description=request.description,
        )
    )
    logger.info("[API] Registered static variable %s", name)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def unregister_variable(name: str):
    """Remove a variable resolver. Unknown names are ignored."""
    get_registry().unregister(name)
