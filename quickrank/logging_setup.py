from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LOG_DIR, LOG_LEVEL, LOG_ROTATION

_configured = False


def configure_logging(level: Optional[str] = None, log_dir: Optional[Path] = LOG_DIR) -> None:
    """
    Route loguru output to stderr plus a rotating file under ``log_dir``.

    Safe to call more than once; only the first call installs sinks.
    Pass ``log_dir=None`` to log to stderr only.
    """
    global _configured
    if _configured:
        return

    lvl = (level or LOG_LEVEL).upper()
    logger.remove()
    logger.add(sys.stderr, level=lvl)
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(log_dir / "quickrank.log", level=lvl, rotation=LOG_ROTATION)
    _configured = True
    logger.debug("Logging configured at level {}", lvl)
