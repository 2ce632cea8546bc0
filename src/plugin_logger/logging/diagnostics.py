"""Diagnostic channel for problems inside the loggers themselves.

File loggers never raise on I/O failures; they report them here instead.
"""

from typing import Optional

from plugin_logger.logging.base_logger import BaseLogger
from plugin_logger.logging.console_logger import ConsoleLogger
from plugin_logger.logging.log_level import LogLevel

_diagnostic_logger: Optional[BaseLogger] = None


def get_diagnostic_logger() -> BaseLogger:
    """Get the diagnostic logger, creating a stderr ConsoleLogger if none set."""
    global _diagnostic_logger
    if _diagnostic_logger is None:
        _diagnostic_logger = ConsoleLogger(level=LogLevel.WARNING)
    return _diagnostic_logger


def set_diagnostic_logger(logger: BaseLogger) -> None:
    global _diagnostic_logger
    _diagnostic_logger = logger


def reset_diagnostic_logger() -> None:
    """Reset to no logger (next get will create the default)."""
    global _diagnostic_logger
    _diagnostic_logger = None
