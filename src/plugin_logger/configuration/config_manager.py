import json
from pathlib import Path
from typing import Any, Dict, Optional

from plugin_logger.logging.diagnostics import get_diagnostic_logger
from plugin_logger.util.paths import get_config_path

DEFAULT_GLOBAL_DEBUG_FLAG = "DEBUG"


class ConfigManager:

    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = Path(config_path) if config_path is not None else get_config_path()
        self._config_data = None

    @property
    def config_path(self):
        return self._config_path

    def load_config_data(self) -> Dict[str, Any]:
        if self._config_data is None:
            self._config_data = self._read_config()

        return self._config_data

    def _read_config(self) -> Dict[str, Any]:
        if not self._config_path.exists():
            return {}

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            get_diagnostic_logger().warning(
                f"Could not load config from {self._config_path}: {e}"
            )
            return {}

        if not isinstance(data, dict):
            get_diagnostic_logger().warning(
                f"Ignoring config {self._config_path}: top level must be an object"
            )
            return {}

        return data

    def get_uploads_dir(self) -> Optional[str]:
        return self.load_config_data().get('uploads_dir')

    def get_global_debug_flag(self) -> str:
        return self.load_config_data().get('global_debug_flag') or DEFAULT_GLOBAL_DEBUG_FLAG

    def get_flags(self) -> Dict[str, Any]:
        flags = self.load_config_data().get('flags', {})
        return flags if isinstance(flags, dict) else {}
