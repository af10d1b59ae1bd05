"""
Configuration manager for SimpleHTTP.

Loads the optional TOML configuration file, applies environment variable
overrides and validates the result into a SimpleHttpConfig.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from simplehttp.constants import CONFIG_DIRECTORY_NAME, CONFIG_FILE_NAME
from simplehttp.exceptions.config import (
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .models import SimpleHttpConfig, SimpleHttpSettings

logger = logging.getLogger(__name__)


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""

    config_section: Dict[str, Any]
    settings: SimpleHttpSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value


def default_config_file() -> Path:
    """Standard per-user configuration file location."""
    return Path.home() / ".config" / CONFIG_DIRECTORY_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """Loads and caches the SimpleHTTP configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to a TOML config file. If None, uses the default location.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[SimpleHttpConfig] = None

    def load_config(self) -> SimpleHttpConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()
        else:
            logger.debug(f"No configuration file at {self.config_file}, using defaults")

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = SimpleHttpConfig(**config_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigurationValidationError(errors, str(self.config_file)) from e

        return self._config

    def reload(self) -> SimpleHttpConfig:
        """Discard the cached configuration and load it again."""
        self._config = None
        return self.load_config()

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from the TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = SimpleHttpSettings()

        config_data.setdefault("http", {})
        config_data.setdefault("logging", {})

        http = EnvironmentOverride(config_data["http"], settings)
        http.apply_if_set(
            "simplehttp_connection_request_timeout_ms", "connection_request_timeout_ms"
        )
        http.apply_if_set("simplehttp_connect_timeout_ms", "connect_timeout_ms")
        http.apply_if_set("simplehttp_socket_timeout_ms", "socket_timeout_ms")

        logging_config = EnvironmentOverride(config_data["logging"], settings)
        logging_config.apply_if_set("simplehttp_logging_level", "level")
        logging_config.apply_if_set("simplehttp_logging_format", "format")
        logging_config.apply_if_set("simplehttp_logging_file_path", "file_path")
        if settings.simplehttp_logging_output:
            outputs = [o.strip() for o in settings.simplehttp_logging_output.split(",")]
            config_data["logging"]["output"] = outputs

        return config_data
