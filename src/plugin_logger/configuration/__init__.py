from plugin_logger.configuration.config_manager import ConfigManager

__all__ = ["ConfigManager"]
