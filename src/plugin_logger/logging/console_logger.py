import json
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

from plugin_logger.logging.base_logger import BaseLogger
from plugin_logger.logging.log_level import LogLevel


class ConsoleLogger(BaseLogger):
    """Logger that prints to a stream with optional timestamps and level prefixes."""

    LEVEL_COLORS = {
        LogLevel.ERROR: "\033[91m",    # Red
        LogLevel.WARNING: "\033[93m",  # Yellow
        LogLevel.INFO: "\033[0m",      # Default
        LogLevel.DEBUG: "\033[90m",    # Gray
    }
    RESET = "\033[0m"

    def __init__(
        self,
        level: LogLevel = LogLevel.WARNING,
        show_timestamp: bool = False,
        show_level: bool = True,
        use_colors: bool = True,
        stream: Optional[TextIO] = None
    ):
        super().__init__(enabled=True)
        self._level = level
        self.show_timestamp = show_timestamp
        self.show_level = show_level
        self.use_colors = use_colors
        self._stream = stream

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel):
        self._level = value

    def should_log(self, label: str) -> bool:
        level = LogLevel.lookup(label)
        # Custom labels have no severity to filter on
        return level is None or level <= self._level

    def _write(self, label: str, message: str, context: Dict[str, Any]) -> None:
        # Resolved per call so pytest's capsys sees the swapped stderr
        stream = self._stream if self._stream is not None else sys.stderr
        parts = []

        if self.show_timestamp:
            parts.append(datetime.now().strftime("[%H:%M:%S]"))

        if self.show_level:
            parts.append(f"[{label}]")

        parts.append(message)
        if context:
            try:
                parts.append(json.dumps(context, ensure_ascii=False, default=str))
            except (TypeError, ValueError):
                parts.append(str(context))
        output = " ".join(parts)

        if self.use_colors and stream.isatty():
            color = self.LEVEL_COLORS.get(LogLevel.lookup(label), self.RESET)
            output = f"{color}{output}{self.RESET}"

        print(output, file=stream)
