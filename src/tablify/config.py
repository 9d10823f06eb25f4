"""Runtime settings read from the environment (and an optional .env at the project root)."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

DEFAULT_TABLE_FORMAT = "grid"
DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(name: str) -> str:
    """Return name if logging knows it as a level, else DEFAULT_LOG_LEVEL."""
    # getLevelName maps a known level name to its int, anything else to a string
    if isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("Unknown TABLIFY_LOG_LEVEL %r, using %s", name, DEFAULT_LOG_LEVEL)
    return DEFAULT_LOG_LEVEL


TABLE_FORMAT = os.getenv("TABLIFY_TABLE_FORMAT", DEFAULT_TABLE_FORMAT)
LOG_LEVEL = _log_level(os.getenv("TABLIFY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper())
