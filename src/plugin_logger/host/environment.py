"""What the loggers need from the host: an uploads directory and flag values."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from plugin_logger.configuration.config_manager import DEFAULT_GLOBAL_DEBUG_FLAG, ConfigManager
from plugin_logger.util.flags import FlagLookup, chain_flag_lookups, env_flag_lookup, mapping_flag_lookup
from plugin_logger.util.paths import get_uploads_dir


def _undefined(name: str) -> Optional[bool]:
    return None


@dataclass
class HostEnvironment:
    uploads_dir: Path
    flag_lookup: FlagLookup = field(default=_undefined)
    global_debug_flag: str = DEFAULT_GLOBAL_DEBUG_FLAG

    def __post_init__(self):
        self.uploads_dir = Path(self.uploads_dir)

    def is_flag_set(self, name: str) -> Optional[bool]:
        """Flag value, or None when the host does not define it."""
        return self.flag_lookup(name)

    def is_global_debug(self) -> bool:
        return bool(self.flag_lookup(self.global_debug_flag))

    @classmethod
    def default(cls, config_manager: Optional[ConfigManager] = None) -> "HostEnvironment":
        """
        Build the environment from os.environ and the JSON config file.

        Environment variables take precedence over the config's flags table.
        """
        config = config_manager or ConfigManager()
        return cls(
            uploads_dir=get_uploads_dir(config.get_uploads_dir()),
            flag_lookup=chain_flag_lookups(
                env_flag_lookup(),
                mapping_flag_lookup(config.get_flags()),
            ),
            global_debug_flag=config.get_global_debug_flag(),
        )
