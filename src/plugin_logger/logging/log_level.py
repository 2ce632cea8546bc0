from enum import IntEnum
from typing import Optional, Union


class LogLevel(IntEnum):
    """Log levels ordered by severity (lower = more severe)."""
    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3

    @classmethod
    def lookup(cls, value: Union["LogLevel", str]) -> Optional["LogLevel"]:
        """Member for a LogLevel or case-insensitive level name, None if unknown."""
        if isinstance(value, cls):
            return value
        return cls.__members__.get(str(value).strip().upper())

    @classmethod
    def label(cls, value: Union["LogLevel", str]) -> str:
        """
        Text written for a level. Names outside this enum are kept,
        uppercased, so custom levels like "CRITICAL" still get logged.
        """
        level = cls.lookup(value)
        if level is not None:
            return level.name
        return str(value).strip().upper() or cls.INFO.name
