import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from plugin_logger.host.environment import HostEnvironment
from plugin_logger.logging.logger import Logger, LoggerOptions
from plugin_logger.util.keys import sanitize_key


class LoggerRegistry:
    """
    Name-keyed cache of Logger instances, one per normalized name.

    A registry can be created and passed around explicitly; the shared
    process-wide one is reached through get_instance(). All operations are
    guarded by a lock so the registry can be used from several threads.
    """

    _instance: Optional["LoggerRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self, environment: Optional[HostEnvironment] = None):
        self._environment = environment
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "LoggerRegistry":
        """Get the shared registry, creating an empty one on first access."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared registry (next get_instance() creates a fresh one). For tests."""
        with cls._instance_lock:
            cls._instance = None

    def register(
        self,
        name: str,
        options: Union[LoggerOptions, Mapping[str, Any], None] = None
    ) -> Logger:
        """
        Return the logger for name, creating it on first registration.

        The first registration wins: options passed for a name that is
        already registered are ignored.
        """
        key = sanitize_key(name)
        with self._lock:
            existing = self._loggers.get(key)
            if existing is not None:
                return existing

            logger = Logger(key, options, environment=self._environment)
            self._loggers[key] = logger
            return logger

    def get(self, name: str) -> Optional[Logger]:
        with self._lock:
            return self._loggers.get(sanitize_key(name))

    def has(self, name: str) -> bool:
        with self._lock:
            return sanitize_key(name) in self._loggers

    def remove(self, name: str) -> bool:
        """Unregister a logger. Its log file is left on disk."""
        with self._lock:
            return self._loggers.pop(sanitize_key(name), None) is not None

    def get_all(self) -> Dict[str, Logger]:
        with self._lock:
            return dict(self._loggers)

    def get_names(self) -> List[str]:
        with self._lock:
            return list(self._loggers)

    def count(self) -> int:
        with self._lock:
            return len(self._loggers)

    def clear(self) -> "LoggerRegistry":
        with self._lock:
            self._loggers.clear()
        return self


def register_logger(
    name: str,
    options: Union[LoggerOptions, Mapping[str, Any], None] = None
) -> Logger:
    """Register a logger on the shared registry, or return the existing one."""
    return LoggerRegistry.get_instance().register(name, options)


def get_logger(name: str) -> Optional[Logger]:
    return LoggerRegistry.get_instance().get(name)


def has_logger(name: str) -> bool:
    return LoggerRegistry.get_instance().has(name)


def remove_logger(name: str) -> bool:
    return LoggerRegistry.get_instance().remove(name)


def get_all_loggers() -> Dict[str, Logger]:
    return LoggerRegistry.get_instance().get_all()
