"""
SimpleHTTP Exception Hierarchy

Exception Hierarchy:
    SimpleHttpError (base)
    ├── InvalidArgumentError (also a ValueError)
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError

Transport and protocol failures are raised by requests and reach the caller
unchanged; they are not part of this hierarchy.
"""

from .arguments import InvalidArgumentError
from .base import ExceptionContext, SimpleHttpError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

__all__ = [
    # Base
    "SimpleHttpError",
    "ExceptionContext",
    # Arguments
    "InvalidArgumentError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
