"""
Configuration-related exceptions.

All exceptions related to configuration parsing and validation.
"""

from typing import Any, List, Optional

from .base import ExceptionContext, SimpleHttpError


class ConfigurationError(SimpleHttpError):
    """Base class for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        context = ExceptionContext(
            help_text=f"Check '{field}' and make sure it matches the expected format: {expected}",
            error_code="CONFIG_INVALID",
        )
        super().__init__(message, context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str], config_location: Optional[str] = None):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        help_text = "Fix the validation errors listed above"
        if config_location:
            help_text += f" in {config_location}"
        context = ExceptionContext(
            help_text=help_text,
            error_code="CONFIG_VALIDATION",
        )
        super().__init__(message, context)
