"""
Configuration for SimpleHTTP.

Usage:
    from simplehttp.config import ConfigManager

    config = ConfigManager().load_config()
    client = SimpleHttpClient(config.http)
"""

from .manager import ConfigManager, default_config_file
from .models import (
    LoggingOptions,
    LogLevel,
    SimpleHttpClientConfig,
    SimpleHttpConfig,
    SimpleHttpSettings,
)

__all__ = [
    "ConfigManager",
    "default_config_file",
    "LoggingOptions",
    "LogLevel",
    "SimpleHttpClientConfig",
    "SimpleHttpConfig",
    "SimpleHttpSettings",
]
