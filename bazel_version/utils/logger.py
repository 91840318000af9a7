"""
Logger
Structured logging for bazel-version.
"""

import logging
import sys
import threading
from typing import Optional


DEFAULT_LOGGER_NAME = "bazel-version"


class Logger:
    """Simple logger wrapper with structured logging support."""
    
    def __init__(self, name: str = DEFAULT_LOGGER_NAME, level: str = "DEBUG"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.DEBUG))
        
        # Only add handler if none exist
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(getattr(logging, level.upper(), logging.DEBUG))
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
    
    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)
    
    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)
    
    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)
    
    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)
    
    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)


_logger: Optional[Logger] = None
_logger_lock = threading.Lock()


def get_logger() -> Logger:
    """Get the shared package logger, configured from ConfigManager."""
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                from bazel_version.config import ConfigManager
                _logger = Logger(level=ConfigManager.get_instance().get().log_level)
    return _logger
