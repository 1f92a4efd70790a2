"""HTTP API for editor integrations."""

from instaprompt.api.app import create_app

__all__ = ["create_app"]
