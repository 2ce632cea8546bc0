from plugin_logger.logging.log_level import LogLevel
from plugin_logger.logging.error_values import ExceptionDetails, HostError
from plugin_logger.logging.base_logger import BaseLogger
from plugin_logger.logging.console_logger import ConsoleLogger
from plugin_logger.logging.diagnostics import (
    get_diagnostic_logger,
    reset_diagnostic_logger,
    set_diagnostic_logger,
)
from plugin_logger.logging.logger import Logger, LoggerOptions
from plugin_logger.logging.logger_registry import (
    LoggerRegistry,
    get_all_loggers,
    get_logger,
    has_logger,
    register_logger,
    remove_logger,
)

__all__ = [
    "LogLevel",
    "ExceptionDetails",
    "HostError",
    "BaseLogger",
    "ConsoleLogger",
    "Logger",
    "LoggerOptions",
    "LoggerRegistry",
    "get_diagnostic_logger",
    "set_diagnostic_logger",
    "reset_diagnostic_logger",
    "register_logger",
    "get_logger",
    "has_logger",
    "remove_logger",
    "get_all_loggers",
]
