"""
SimpleHTTP Logging Package

Configures handlers for the library's standard-library loggers:
- config: logging configuration object
- formatters: log formatting (JSON, console, rich)
- manager: centralized logging setup
"""

from .config import LoggingConfig
from .formatters import ConsoleFormatter, StructuredFormatter
from .manager import LoggingManager, configure_logging, logging_manager

__all__ = [
    "ConsoleFormatter",
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "StructuredFormatter",
]
