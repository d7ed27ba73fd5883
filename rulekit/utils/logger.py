"""
Logger
Logging setup for the rulekit CLI and MCP server.

Library modules log through ``logging.getLogger(__name__)``; they all live
under the ``rulekit`` namespace, so a handler installed here on the package
logger also receives scanner warnings.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


class Logger:
    """Thin wrapper around the package logger with a stderr handler."""

    def __init__(self, name: str = "rulekit", level: str = "INFO", stream: Optional[TextIO] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_resolve_level(level))

        # stdout belongs to the MCP transport, so never log there by default
        if not self.logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setLevel(_resolve_level(level))
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)
