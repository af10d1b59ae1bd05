"""
Synchronous HTTP client façade.

SimpleHttpClient turns SimpleHttpRequest values into requests.Request objects,
sends them through a shared requests.Session and converts the result back into
SimpleHttpResponse values. Every response and stream it opens is closed before
the call returns, including when the call fails.
"""

import logging
import os
from typing import Iterable, List, Mapping, Optional, Tuple, Union

import requests

from .config.models import SimpleHttpClientConfig
from .constants import (
    CONTENT_LENGTH,
    CONTENT_TYPE,
    DOWNLOAD_CHUNK_SIZE,
    METHOD_DELETE,
    METHOD_GET,
    METHOD_POST,
    METHOD_PUT,
    NO_ENTITY_STATUSES,
    TRANSFER_ENCODING,
)
from .content_type import DEFAULT_CONTENT_TYPE, ContentType
from .exceptions import InvalidArgumentError
from .models import Header, SimpleHttpRequest, SimpleHttpResponse
from .streams import FileStreamProvider, PathLike, StreamProvider


class SimpleHttpClient:
    """Uniform GET/POST/PUT/DELETE and file transfer over a requests session."""

    def __init__(
        self,
        config: Optional[SimpleHttpClientConfig] = None,
        session: Optional[requests.Session] = None,
        stream_provider: Optional[StreamProvider] = None,
    ):
        """Initialize the client.

        Args:
            config: Timeouts passed to the engine. None keeps engine defaults.
            session: Existing session to reuse. A new one is created otherwise.
            stream_provider: Opens download destinations. Defaults to local files.
        """
        self.config = config or SimpleHttpClientConfig()
        self.timeout = self.config.timeout
        self.session = session or requests.Session()
        self.stream_provider = stream_provider or FileStreamProvider()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        if self.config.connection_request_timeout_ms is not None:
            self.logger.debug(
                f"connection_request_timeout_ms={self.config.connection_request_timeout_ms} "
                "is ignored: requests never waits for a pooled connection"
            )

    def get(self, request: SimpleHttpRequest) -> SimpleHttpResponse:
        """Perform a GET and buffer the response body as text."""
        self.validate_request(request)
        native = requests.Request(METHOD_GET, request.uri)
        self.copy_headers(request, native)
        return self.execute(native)

    def post(
        self, request: SimpleHttpRequest, body: Optional[str] = None
    ) -> SimpleHttpResponse:
        """Perform a POST with an optional text body."""
        self.validate_request(request)
        native = requests.Request(METHOD_POST, request.uri)
        self.copy_headers(request, native)
        self._attach_text_body(request, native, body)
        return self.execute(native)

    def put(
        self, request: SimpleHttpRequest, body: Optional[str] = None
    ) -> SimpleHttpResponse:
        """Perform a PUT with an optional text body."""
        self.validate_request(request)
        native = requests.Request(METHOD_PUT, request.uri)
        self.copy_headers(request, native)
        self._attach_text_body(request, native, body)
        return self.execute(native)

    def delete(self, request: SimpleHttpRequest) -> SimpleHttpResponse:
        """Perform a DELETE."""
        self.validate_request(request)
        native = requests.Request(METHOD_DELETE, request.uri)
        self.copy_headers(request, native)
        return self.execute(native)

    def put_file(
        self, request: SimpleHttpRequest, source: Optional[PathLike]
    ) -> SimpleHttpResponse:
        """Upload the contents of ``source`` as the body of a PUT.

        The file is streamed by the engine and closed before returning.
        """
        self.validate_request(request)
        if source is None:
            raise InvalidArgumentError("source")

        with open(source, "rb") as upload:
            # requests sends an empty file object chunked; b"" gets Content-Length: 0
            data = upload if os.fstat(upload.fileno()).st_size else b""
            native = requests.Request(METHOD_PUT, request.uri, data=data)
            self.copy_headers(request, native)
            return self.execute(native)

    def get_file(
        self, request: SimpleHttpRequest, destination: Optional[PathLike]
    ) -> SimpleHttpResponse:
        """Stream the response body of a GET into ``destination``.

        The returned response carries no content. On every exit path the
        destination stream is closed first, then the response.
        """
        self.validate_request(request)
        if destination is None:
            raise InvalidArgumentError("destination")

        native = requests.Request(METHOD_GET, request.uri)
        self.copy_headers(request, native)

        response = None
        stream = self.stream_provider.open_output_stream(destination)
        succeeded = False
        try:
            response = self._send(native, stream=True)
            written = 0
            for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                if chunk:
                    stream.write(chunk)
                    written += len(chunk)
            self.logger.debug(
                f"Response: {response.status_code} - {written} bytes written to {destination}",
                extra={
                    "method": native.method,
                    "uri": native.url,
                    "status": response.status_code,
                    "bytes": written,
                    "destination": str(destination),
                },
            )
            result = SimpleHttpResponse(
                status_code=response.status_code,
                status_reason=response.reason,
                content=None,
                headers=self._response_headers(response),
            )
            succeeded = True
            return result
        finally:
            self._release([stream, response], raise_errors=succeeded)

    def execute(self, native_request: Optional[requests.Request]) -> SimpleHttpResponse:
        """Send a native request and buffer its response body as text.

        ``content`` is None when the response has no entity.
        """
        if native_request is None:
            raise InvalidArgumentError("native_request")

        response = None
        succeeded = False
        try:
            response = self._send(native_request)
            content = response.text if self._has_entity(response) else None
            size = len(response.content or b"")
            self.logger.debug(
                f"Response: {response.status_code} - {size} bytes",
                extra={
                    "method": native_request.method,
                    "uri": native_request.url,
                    "status": response.status_code,
                    "bytes": size,
                },
            )
            result = SimpleHttpResponse(
                status_code=response.status_code,
                status_reason=response.reason,
                content=content,
                headers=self._response_headers(response),
            )
            succeeded = True
            return result
        finally:
            self._release([response], raise_errors=succeeded)

    def close(self) -> None:
        """Close the underlying session and its connection pool."""
        if self.session:
            self.session.close()

    def __enter__(self) -> "SimpleHttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @staticmethod
    def validate_request(request: Optional[SimpleHttpRequest]) -> None:
        """Raise InvalidArgumentError if the request or its URI is missing."""
        if request is None:
            raise InvalidArgumentError("request")
        if not request.uri:
            raise InvalidArgumentError("request.uri")

    @staticmethod
    def copy_headers(
        request: Optional[SimpleHttpRequest], native_request: Optional[requests.Request]
    ) -> None:
        """Copy every request header verbatim onto the native request."""
        if request is None:
            raise InvalidArgumentError("request")
        if native_request is None:
            raise InvalidArgumentError("native_request")
        if request.headers:
            for name, value in request.headers.items():
                native_request.headers[name] = value

    @staticmethod
    def extract_content_type(request: Optional[SimpleHttpRequest]) -> ContentType:
        """Parse the request's Content-Type header, defaulting to application/json."""
        value = _find_header(request.headers if request else None, CONTENT_TYPE)
        if value is None:
            return DEFAULT_CONTENT_TYPE
        return ContentType.parse(value)

    @staticmethod
    def convert_headers(
        headers: Union[Mapping[str, str], Iterable[Tuple[str, str]], None],
    ) -> Optional[Tuple[Header, ...]]:
        """Convert engine headers (a mapping or name/value pairs) to Header values."""
        if headers is None:
            return None
        items = headers.items() if hasattr(headers, "items") else headers
        return tuple(Header(name, value) for name, value in items)

    def _attach_text_body(
        self,
        request: SimpleHttpRequest,
        native_request: requests.Request,
        body: Optional[str],
    ) -> None:
        """Encode ``body`` as the request entity; None attaches nothing."""
        content_type = self.extract_content_type(request)
        if body is None:
            return
        native_request.data = content_type.encode(body)
        if _find_header(native_request.headers, CONTENT_TYPE) is None:
            native_request.headers[CONTENT_TYPE] = str(content_type)

    def _send(self, native_request: requests.Request, stream: bool = False) -> requests.Response:
        self.logger.debug(
            f"{native_request.method} {native_request.url}",
            extra={"method": native_request.method, "uri": native_request.url},
        )
        prepared = self.session.prepare_request(native_request)
        return self.session.send(prepared, timeout=self.timeout, stream=stream)

    @classmethod
    def _response_headers(cls, response: requests.Response) -> Optional[Tuple[Header, ...]]:
        """Every response header, repeats kept as separate entries.

        ``response.headers`` folds repeated names into one comma-joined value,
        so the urllib3 header dict is read when the engine exposes one. Names
        keep first-seen order with their repeats grouped after them.
        """
        raw_headers = getattr(response.raw, "headers", None)
        if raw_headers:
            return cls.convert_headers(list(raw_headers.items()))
        return cls.convert_headers(response.headers)

    @staticmethod
    def _has_entity(response: requests.Response) -> bool:
        if response.status_code < 200 or response.status_code in NO_ENTITY_STATUSES:
            return False
        if response.content:
            return True
        headers = response.headers or {}
        return CONTENT_LENGTH in headers or TRANSFER_ENCODING in headers

    def _release(self, resources: List[object], raise_errors: bool) -> None:
        """Close resources in order, attempting every close.

        When ``raise_errors`` is false an error is already propagating, so close
        failures are logged and dropped. Otherwise the first one is raised after
        all closes were attempted.
        """
        first_error = None
        for resource in resources:
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as e:
                if raise_errors and first_error is None:
                    first_error = e
                else:
                    self.logger.warning(
                        f"Failed to close {type(resource).__name__}: {e}"
                    )
        if first_error is not None:
            raise first_error


def _find_header(headers, name: str) -> Optional[str]:
    """Case-insensitive header lookup on a plain dict."""
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None
