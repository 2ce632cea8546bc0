from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union

from plugin_logger.logging.error_values import ExceptionDetails, HostError
from plugin_logger.logging.log_level import LogLevel


class BaseLogger(ABC):
    """Abstract base for all loggers."""

    def __init__(self, enabled: bool = True):
        self._enabled = enabled

    def is_enabled(self) -> bool:
        return self._enabled

    def should_log(self, label: str) -> bool:
        return self._enabled

    @abstractmethod
    def _write(self, label: str, message: str, context: Dict[str, Any]) -> None:
        """Write a log entry. Implementations must override this."""
        pass

    def log(
        self,
        message: str,
        context: Optional[Mapping[str, Any]] = None,
        level: Union[LogLevel, str] = LogLevel.INFO
    ) -> None:
        if not self._enabled:
            return
        label = LogLevel.label(level)
        if self.should_log(label):
            self._write(label, message, dict(context or {}))

    def error(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(message, context, LogLevel.ERROR)

    def warning(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(message, context, LogLevel.WARNING)

    def info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(message, context, LogLevel.INFO)

    def debug(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(message, context, LogLevel.DEBUG)

    def exception(self, exception: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """
        Log an exception at ERROR level.

        Accepts a raised Python exception or an ExceptionDetails. The keys
        file, line and trace are added to the context, replacing any the
        caller passed under the same names. Other values are ignored.
        """
        if isinstance(exception, BaseException):
            details = ExceptionDetails.from_exception(exception)
        elif isinstance(exception, ExceptionDetails):
            details = exception
        else:
            return

        merged = dict(context or {})
        merged.update({
            "file": details.file,
            "line": details.line,
            "trace": details.trace,
        })
        self.error(f"[{details.type_name}] {details.message}", merged)

    def host_error(self, host_error: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log a HostError's message at ERROR level with its code and data."""
        if not isinstance(host_error, HostError):
            return

        merged = dict(context or {})
        merged["error_code"] = host_error.code
        merged["error_data"] = host_error.data
        self.error(host_error.message, merged)
