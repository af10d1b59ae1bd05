"""
Content-Type parsing and text body encoding.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import APPLICATION_JSON, DEFAULT_JSON_CHARSET, DEFAULT_TEXT_CHARSET
from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ContentType:
    """A media type with an optional charset parameter."""

    mime_type: str
    charset: Optional[str] = None

    @classmethod
    def parse(cls, value: Optional[str]) -> "ContentType":
        """Parse a Content-Type header value such as ``text/plain; charset=UTF-8``.

        Parameters other than ``charset`` are ignored.
        """
        if value is None or not value.strip():
            raise InvalidArgumentError("Content-Type", "Content-Type cannot be blank")

        mime_type, _, params = value.partition(";")
        mime_type = mime_type.strip()
        if not mime_type:
            raise InvalidArgumentError(
                "Content-Type", f"Content-Type has no media type: {value!r}"
            )

        charset = None
        for param in params.split(";"):
            key, sep, raw = param.partition("=")
            if sep and key.strip().lower() == "charset":
                charset = raw.strip().strip('"') or None
        return cls(mime_type, charset)

    @property
    def effective_charset(self) -> str:
        """Charset used to encode a text body of this type."""
        if self.charset:
            return self.charset
        if self.mime_type.lower() == APPLICATION_JSON:
            return DEFAULT_JSON_CHARSET
        return DEFAULT_TEXT_CHARSET

    def encode(self, body: str) -> bytes:
        """Encode ``body`` with this type's charset."""
        charset = self.effective_charset
        try:
            return body.encode(charset)
        except LookupError:
            raise InvalidArgumentError(
                "Content-Type", f"Unsupported charset: {charset}"
            ) from None
        except UnicodeEncodeError as e:
            raise InvalidArgumentError(
                "body", f"Body cannot be encoded as {charset}: {e.reason}"
            ) from e

    def __str__(self) -> str:
        if self.charset:
            return f"{self.mime_type}; charset={self.charset}"
        return self.mime_type


DEFAULT_CONTENT_TYPE = ContentType(APPLICATION_JSON, DEFAULT_JSON_CHARSET)
