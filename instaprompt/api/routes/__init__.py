"""API route modules."""

from instaprompt.api.routes import context, prompts, resolve, variables

__all__ = ["context", "prompts", "resolve", "variables"]
