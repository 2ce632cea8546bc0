import json
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from plugin_logger.host.environment import HostEnvironment
from plugin_logger.logging.base_logger import BaseLogger
from plugin_logger.logging.diagnostics import get_diagnostic_logger
from plugin_logger.util.flags import parse_flag
from plugin_logger.util.keys import debug_flag_name, sanitize_key
from plugin_logger.util.paths import DEFAULT_LOG_FILENAME, ensure_protected_dir, is_bare_filename


@dataclass(frozen=True)
class LoggerOptions:
    """
    Optional per-logger configuration.

    enabled: None means resolve from {NAME}_DEBUG, then the global debug flag.
    Strings such as "false" or "1" are read like flag values.
    log_file: None (or "." / "..") means {uploads}/{name}/debug.log; a bare
    filename is placed in {uploads}/{name}/; anything with a directory part
    is used as is.
    """
    enabled: Optional[Union[bool, str]] = None
    log_file: Optional[str] = None

    @classmethod
    def coerce(cls, options: Union["LoggerOptions", Mapping[str, Any], None]) -> "LoggerOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        log_file = options.get("log_file")
        return cls(
            enabled=options.get("enabled"),
            log_file=os.fspath(log_file) if log_file is not None else None,
        )


class Logger(BaseLogger):
    """
    Appends leveled, timestamped entries to a per-plugin log file.

    Entries look like:
        [2025-01-15T10:30:45+00:00] ERROR: Payment failed {"user_id":123}

    No file handle is kept open; every entry is a single append write.
    """

    def __init__(
        self,
        name: str,
        options: Union[LoggerOptions, Mapping[str, Any], None] = None,
        environment: Optional[HostEnvironment] = None
    ):
        self._name = sanitize_key(name)
        if not self._name:
            raise ValueError(f"Logger name {name!r} is empty after normalization")

        self._environment = environment or HostEnvironment.default()
        options = LoggerOptions.coerce(options)

        super().__init__(enabled=self._resolve_enabled(options.enabled))
        self._log_file = self._resolve_log_file(options.log_file)

        self._setup_log_directory()

    @property
    def name(self) -> str:
        return self._name

    def _resolve_enabled(self, explicit: Optional[bool]) -> bool:
        candidates = (
            lambda: explicit,
            lambda: self._environment.is_flag_set(debug_flag_name(self._name)),
            lambda: self._environment.is_global_debug(),
        )
        for candidate in candidates:
            value = candidate()
            if value is not None:
                return parse_flag(value)
        return False

    def _resolve_log_file(self, log_file: Optional[str]) -> str:
        plugin_dir = self._environment.uploads_dir / self._name
        if not log_file or log_file in (".", ".."):
            return str(plugin_dir / DEFAULT_LOG_FILENAME)
        if is_bare_filename(log_file):
            return str(plugin_dir / log_file)
        return log_file

    def _setup_log_directory(self) -> None:
        directory = Path(self._log_file).parent
        try:
            ensure_protected_dir(directory)
        except OSError as e:
            get_diagnostic_logger().warning(
                f"Could not prepare log directory {directory}: {e}",
                {"logger": self._name},
            )

    def _encode_context(self, context: Mapping[str, Any]) -> str:
        try:
            return json.dumps(context, separators=(",", ":"), ensure_ascii=False, default=str)
        except (TypeError, ValueError) as e:
            # Circular references and non-string keys: keep the entry, store the context as text
            get_diagnostic_logger().warning(
                f"Log context is not JSON serializable: {e}",
                {"logger": self._name},
            )
            return json.dumps(str(context), ensure_ascii=False)

    def format_entry(self, label: str, message: str, context: Mapping[str, Any]) -> str:
        timestamp = datetime.now().astimezone().isoformat(timespec="seconds")
        context_str = " " + self._encode_context(context) if context else ""
        return f"[{timestamp}] {label}: {message}{context_str}\n"

    def _write(self, label: str, message: str, context: Dict[str, Any]) -> None:
        entry = self.format_entry(label, message, context).encode("utf-8")
        try:
            fd = os.open(self._log_file, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
            try:
                os.write(fd, entry)
            finally:
                os.close(fd)
        except OSError as e:
            get_diagnostic_logger().warning(
                f"Could not write to log file {self._log_file}: {e}",
                {"logger": self._name},
            )

    def clear(self) -> bool:
        """Delete the log file. A file that is already gone counts as cleared."""
        try:
            os.remove(self._log_file)
        except FileNotFoundError:
            return True
        except OSError as e:
            get_diagnostic_logger().warning(
                f"Could not delete log file {self._log_file}: {e}",
                {"logger": self._name},
            )
            return False
        return True

    def get_contents(self) -> str:
        """Full log text, or "" when the file is missing or unreadable."""
        try:
            with open(self._log_file, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            get_diagnostic_logger().warning(
                f"Could not read log file {self._log_file}: {e}",
                {"logger": self._name},
            )
            return ""

    def get_file(self) -> str:
        return self._log_file

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, log_file={self._log_file!r}, enabled={self._enabled!r})"
