"""Logging setup."""

import logging

from instaprompt.config import get_log_level

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name override (None = INSTAPROMPT_LOG_LEVEL)
    """
    logging.basicConfig(
        level=(level or get_log_level()).upper(),
        format=LOG_FORMAT,
        force=True,
    )
