"""
Invalid-argument exceptions.

Raised synchronously, before any network or file action, when a caller passes
a missing or malformed argument to the client.
"""

from typing import Optional

from .base import ExceptionContext, SimpleHttpError


class InvalidArgumentError(SimpleHttpError, ValueError):
    """Raised when an operation receives an absent or malformed argument."""

    ERROR_CODE = "INVALID_ARGUMENT"

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        message = message or f"{argument} cannot be None"
        context = ExceptionContext(
            error_code=self.ERROR_CODE,
            context={"argument": argument},
        )
        super().__init__(message, context)
