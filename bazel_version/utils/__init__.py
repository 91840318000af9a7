"""
Utils Module
Logging helpers.
"""

from .logger import Logger, get_logger

__all__ = ["Logger", "get_logger"]
