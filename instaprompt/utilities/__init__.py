"""Utilities - logging."""

from instaprompt.utilities.logging import setup_logging

__all__ = [
    "setup_logging",
]
