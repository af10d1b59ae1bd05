"""
Request and response value types.

These are the only types callers need to build a call and read its result.
Native requests and responses from the HTTP engine never leave the client.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Header:
    """A single response header."""

    name: str
    value: str


@dataclass(frozen=True)
class SimpleHttpRequest:
    """Immutable description of one call.

    Attributes:
        uri: Absolute request URI. Required before any operation runs.
        headers: Header name to value. Names are unique; when built from
            pairs the last value for a name wins.
    """

    uri: Optional[str] = None
    headers: Optional[Dict[str, str]] = field(default=None, hash=False)

    def __post_init__(self):
        if self.headers is not None:
            object.__setattr__(self, "headers", dict(self.headers))


@dataclass(frozen=True)
class SimpleHttpResponse:
    """Result of one call.

    ``content`` is None when the response had no entity and for downloads
    written straight to a file.
    """

    status_code: int
    status_reason: Optional[str]
    content: Optional[str] = None
    headers: Optional[Tuple[Header, ...]] = None

    def get_first_header(self, name: str) -> Optional[Header]:
        """Return the first header matching ``name`` case-insensitively."""
        if not self.headers:
            return None
        wanted = name.lower()
        for header in self.headers:
            if header.name.lower() == wanted:
                return header
        return None
