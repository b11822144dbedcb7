"""Logging setup shared by the command line and embedding applications."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logger(
    name: str = "phraser",
    level: Union[int, str] = logging.WARNING,
    stream: Optional[object] = None
) -> logging.Logger:
    """
    Configure and return the package logger.
    
    Safe to call more than once: an existing handler is reused and only
    the level is updated.
    
    Args:
        name: Logger name (the package root by default)
        level: Level name ("INFO") or numeric level
        stream: Output stream (defaults to stderr)
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    
    if not any(getattr(h, "_phraser_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._phraser_handler = True
        logger.addHandler(handler)
    
    return logger
