"""
Configuration models for SimpleHTTP.

Pydantic models for the client timeouts and logging, plus the settings class
that picks up environment variable overrides.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simplehttp.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    MILLISECONDS_PER_SECOND,
    MIN_LOG_FILE_SIZE_BYTES,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _to_seconds(milliseconds: Optional[int]) -> Optional[float]:
    if milliseconds is None:
        return None
    return milliseconds / MILLISECONDS_PER_SECOND


class SimpleHttpClientConfig(BaseModel):
    """Timeouts handed to the HTTP engine. None means the engine default."""

    connection_request_timeout_ms: Optional[int] = Field(
        None, ge=0, description="Time to wait for a pooled connection (ms)"
    )
    connect_timeout_ms: Optional[int] = Field(
        None, ge=0, description="Time to establish a connection (ms)"
    )
    socket_timeout_ms: Optional[int] = Field(
        None, ge=0, description="Maximum inactivity between two data packets (ms)"
    )

    model_config = {"extra": "forbid"}

    @property
    def timeout(self) -> Optional[Tuple[Optional[float], Optional[float]]]:
        """The ``(connect, read)`` timeout tuple requests expects, in seconds."""
        connect = _to_seconds(self.connect_timeout_ms)
        read = _to_seconds(self.socket_timeout_ms)
        if connect is None and read is None:
            return None
        return connect, read


class LoggingOptions(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class SimpleHttpConfig(BaseModel):
    """Top-level configuration."""

    http: SimpleHttpClientConfig = Field(default_factory=SimpleHttpClientConfig)
    logging: LoggingOptions = Field(default_factory=LoggingOptions)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class SimpleHttpSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    # HTTP settings
    simplehttp_connection_request_timeout_ms: Optional[int] = Field(
        None, alias="SIMPLEHTTP_CONNECTION_REQUEST_TIMEOUT_MS"
    )
    simplehttp_connect_timeout_ms: Optional[int] = Field(
        None, alias="SIMPLEHTTP_CONNECT_TIMEOUT_MS"
    )
    simplehttp_socket_timeout_ms: Optional[int] = Field(
        None, alias="SIMPLEHTTP_SOCKET_TIMEOUT_MS"
    )

    # Logging settings
    simplehttp_logging_level: Optional[str] = Field(
        None, alias="SIMPLEHTTP_LOGGING_LEVEL"
    )
    simplehttp_logging_format: Optional[str] = Field(
        None, alias="SIMPLEHTTP_LOGGING_FORMAT"
    )
    simplehttp_logging_output: Optional[str] = Field(
        None, alias="SIMPLEHTTP_LOGGING_OUTPUT"
    )
    simplehttp_logging_file_path: Optional[str] = Field(
        None, alias="SIMPLEHTTP_LOGGING_FILE_PATH"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
