from __future__ import annotations
import logging, sys
from typing import Optional

from .config import setting

# ----------------- logging -----------------
def get_logger(name: str = "docbr", level: Optional[int | str] = None) -> logging.Logger:
    """Logger com um único StreamHandler em stdout; nível/formato vêm da config."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter(setting("DOCBR_LOG_FORMAT"))
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    if level is None:
        level = setting("DOCBR_LOG_LEVEL").upper()
    logger.setLevel(level)
    return logger
