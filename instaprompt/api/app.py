"""InstaPrompt FastAPI application.

Startup: database schema, then built-in resolvers bound to the
process-wide editor state.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from instaprompt import __version__
from instaprompt.api.routes import context, prompts, resolve, variables
from instaprompt.config import get_task_directory
from instaprompt.database import init_db
from instaprompt.editor import get_editor_state
from template_resolver import get_registry, register_builtin_resolvers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("[API] InstaPrompt %s starting", __version__)
    init_db()
    register_builtin_resolvers(
        get_registry(), get_editor_state(), task_directory=get_task_directory()
    )
    logger.info("[API] %d template variables registered", get_registry().count())
    yield
    logger.info("[API] InstaPrompt shutting down")


def create_app() -> FastAPI:
    """Build the API application."""
    app = FastAPI(title="InstaPrompt", version=__version__, lifespan=lifespan)
    app.include_router(prompts.router, prefix="/api", tags=["Prompts"])
    app.include_router(resolve.router, prefix="/api", tags=["Resolve"])
    app.include_router(variables.router, prefix="/api", tags=["Variables"])
    app.include_router(context.router, prefix="/api", tags=["Context"])
    return app
