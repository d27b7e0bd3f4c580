"""
Utility modules for the command gate.
"""

from .logger import LoggerMixin, get_logger, setup_logging
from .errors import CommandConfigurationError
from .error_handler import ErrorHandler, get_error_handler

__all__ = [
    "LoggerMixin",
    "get_logger",
    "setup_logging",
    "CommandConfigurationError",
    "ErrorHandler",
    "get_error_handler",
]
