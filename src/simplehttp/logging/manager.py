"""
Installs the configured log handlers.

LoggingManager is a process-wide singleton. Each configure() call replaces
the handlers it installed previously and leaves any other root handlers alone.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from simplehttp.constants import DEFAULT_LOG_FILE

from .config import LoggingConfig
from .formatters import create_formatter, create_rich_handler

PACKAGE_LOGGER = "simplehttp"


class LoggingManager:
    """Owns the handlers SimpleHTTP adds to the root logger."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config = None
            self.handlers = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Replace the installed handlers with one per configured output."""
        self.reset()
        self.config = config

        root_logger = logging.getLogger()
        root_logger.setLevel(config.level)
        for output in config.output:
            handler = self._create_handler(output, config)
            handler.setLevel(config.level)
            root_logger.addHandler(handler)
            self.handlers.append(handler)

        logging.getLogger(PACKAGE_LOGGER).setLevel(config.level)

    def reset(self):
        """Detach and close every handler this manager installed."""
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    @staticmethod
    def _create_handler(output: str, config: LoggingConfig) -> logging.Handler:
        if output == "file":
            file_path = Path(config.file_path or DEFAULT_LOG_FILE)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                file_path,
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        elif output == "console":
            if config.format_type == "rich":
                return create_rich_handler()
            handler = logging.StreamHandler(sys.stderr)
        else:
            raise ValueError(f"Unknown log output: {output}")

        handler.setFormatter(
            create_formatter(config.format_type, config.service_name, config.version)
        )
        return handler


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
