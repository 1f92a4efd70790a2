"""Application configuration.

Settings come from environment variables and are read through cached
getters. Call reset_config_cache() after changing the environment
(tests).
"""

import os
from functools import lru_cache
from pathlib import Path

from template_resolver import DEFAULT_TASK_DIRECTORY

__all__ = [
    "get_database_path",
    "get_log_level",
    "get_server_host",
    "get_server_port",
    "get_task_directory",
    "reset_config_cache",
]

DEFAULT_DATABASE_PATH = Path.home() / ".instaprompt" / "instaprompt.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765


@lru_cache(maxsize=1)
def get_database_path() -> Path:
    """Path of the SQLite prompt store (INSTAPROMPT_DB_PATH)."""
    value = os.environ.get("INSTAPROMPT_DB_PATH")
    return Path(value).expanduser() if value else DEFAULT_DATABASE_PATH


@lru_cache(maxsize=1)
def get_log_level() -> str:
    """Root log level name (INSTAPROMPT_LOG_LEVEL)."""
    return os.environ.get("INSTAPROMPT_LOG_LEVEL", "INFO").upper()


@lru_cache(maxsize=1)
def get_task_directory() -> str:
    """Directory holding task documents (INSTAPROMPT_TASK_DIR)."""
    return os.environ.get("INSTAPROMPT_TASK_DIR") or DEFAULT_TASK_DIRECTORY


@lru_cache(maxsize=1)
def get_server_host() -> str:
    """Bind address for the API server (INSTAPROMPT_HOST)."""
    return os.environ.get("INSTAPROMPT_HOST", DEFAULT_HOST)


@lru_cache(maxsize=1)
def get_server_port() -> int:
    """Port for the API server (INSTAPROMPT_PORT)."""
    value = os.environ.get("INSTAPROMPT_PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"INSTAPROMPT_PORT must be an integer, got {value!r}") from None


def reset_config_cache() -> None:
    """Forget cached settings so the environment is read again."""
    for getter in (
        get_database_path,
        get_log_level,
        get_task_directory,
        get_server_host,
        get_server_port,
    ):
        getter.cache_clear()
