# Plugin Logger - Main Package

__version__ = "0.1.0"

# logging must load first: configuration reports problems through its diagnostics
from plugin_logger.logging import (
    HostError,
    LogLevel,
    Logger,
    LoggerOptions,
    LoggerRegistry,
    get_all_loggers,
    get_logger,
    has_logger,
    register_logger,
    remove_logger,
)
from plugin_logger.host.environment import HostEnvironment
