from typing import Any, Dict, List, Tuple

import pytest

from plugin_logger.host.environment import HostEnvironment
from plugin_logger.logging import BaseLogger, LoggerRegistry, LogLevel
from plugin_logger.logging.diagnostics import reset_diagnostic_logger, set_diagnostic_logger
from plugin_logger.util.flags import mapping_flag_lookup


class RecordingLogger(BaseLogger):
    """Keeps every entry in memory so tests can inspect diagnostics."""

    def __init__(self):
        super().__init__(enabled=True)
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _write(self, label: str, message: str, context: Dict[str, Any]) -> None:
        self.records.append((label, message, context))

    def messages(self, level: LogLevel) -> List[str]:
        return [message for recorded, message, _ in self.records if recorded == level.name]


@pytest.fixture(autouse=True)
def isolated_host(tmp_path, monkeypatch):
    """Point the default host environment at a temp dir and clear debug flags."""
    monkeypatch.setenv("PLUGIN_LOGGER_ROOT", str(tmp_path / "app"))
    monkeypatch.setenv("PLUGIN_LOGGER_UPLOADS_DIR", str(tmp_path / "default-uploads"))
    monkeypatch.delenv("PLUGIN_LOGGER_CONFIG", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    LoggerRegistry.reset()
    reset_diagnostic_logger()
    yield
    LoggerRegistry.reset()
    reset_diagnostic_logger()


@pytest.fixture
def diagnostics():
    recorder = RecordingLogger()
    set_diagnostic_logger(recorder)
    return recorder


@pytest.fixture
def uploads_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def make_environment(uploads_dir):
    def factory(**flags):
        return HostEnvironment(uploads_dir=uploads_dir, flag_lookup=mapping_flag_lookup(flags))
    return factory


@pytest.fixture
def environment(make_environment):
    return make_environment()
