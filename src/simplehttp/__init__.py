"""
SimpleHTTP - a small, uniform request/response façade over requests.

Usage:
    from simplehttp import SimpleHttpClient, SimpleHttpRequest

    with SimpleHttpClient() as client:
        response = client.get(SimpleHttpRequest("https://example.com/api"))
"""

__version__ = "0.1.0"

from .client import SimpleHttpClient
from .config import SimpleHttpClientConfig
from .content_type import ContentType
from .exceptions import InvalidArgumentError, SimpleHttpError
from .models import Header, SimpleHttpRequest, SimpleHttpResponse
from .streams import FileStreamProvider, StreamProvider

__all__ = [
    "__version__",
    "SimpleHttpClient",
    "SimpleHttpClientConfig",
    "SimpleHttpRequest",
    "SimpleHttpResponse",
    "Header",
    "ContentType",
    "StreamProvider",
    "FileStreamProvider",
    "SimpleHttpError",
    "InvalidArgumentError",
]
