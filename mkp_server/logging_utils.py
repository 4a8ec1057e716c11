"""
Logging helpers for the MKP server.

stdout carries the MCP protocol, so every handler writes to stderr.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "mkp_server"
LOG_FORMAT = "[MKP MCP] %(asctime)s %(levelname)s %(name)s: %(message)s"

# Handler installed by configure_logging(), if any
_stderr_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the mkp_server hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _stderr_handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if _stderr_handler is None or _stderr_handler not in root.handlers:
        _stderr_handler = logging.StreamHandler(sys.stderr)
        _stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_stderr_handler)
    return root
