from plugin_logger.host.environment import HostEnvironment

__all__ = ["HostEnvironment"]
