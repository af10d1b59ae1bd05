"""
Logging configuration.

Plain configuration object consumed by LoggingManager, plus a converter from
the validated LoggingOptions model.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from simplehttp import __version__
from simplehttp.config.models import LoggingOptions
from simplehttp.constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.INFO,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[str, List[str]] = "console",  # "console", "file", or both
        file_path: Optional[Path] = None,
        max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
        service_name: str = "simplehttp",
        version: str = __version__,
    ):
        self.level = (
            level if isinstance(level, int) else getattr(logging, level.upper())
        )
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        self.file_path = file_path
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version

    @classmethod
    def from_options(cls, options: LoggingOptions) -> "LoggingConfig":
        """Build a logging configuration from the validated config model."""
        return cls(
            level=options.level.value,
            format_type=options.format,
            output=list(options.output),
            file_path=options.file_path,
            max_file_size=options.max_file_size,
            backup_count=options.backup_count,
        )
