"""
Logging setup for the go-scan command line.
"""

import logging
import os

LOG_LEVEL_ENV = "GO_SCAN_LOG_LEVEL"


def setup_logger(name: str | None = None, *, level=None):
    """
    Configure root or named logger with a console handler. The level comes
    from the argument, else GO_SCAN_LOG_LEVEL, else INFO.
    """
    logger = logging.getLogger(name)
    if level is None:
        name_from_env = (os.getenv(LOG_LEVEL_ENV) or "INFO").strip().upper()
        level = getattr(logging, name_from_env, logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if logger.handlers:  # avoid duplicate handlers on repeated calls
        return logger

    fmt = logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    return logger
