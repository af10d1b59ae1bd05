"""
Pytest configuration and shared fixtures for SimpleHTTP tests.
"""

from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from simplehttp.client import SimpleHttpClient
from simplehttp.models import SimpleHttpRequest, SimpleHttpResponse
from simplehttp.streams import StreamProvider


@pytest.fixture
def mock_response():
    """Engine response with status 200/"reason", no headers and no entity."""
    response = Mock(spec=requests.Response)
    response.status_code = 200
    response.reason = "reason"
    response.headers = CaseInsensitiveDict()
    response.content = b""
    response.text = ""
    response.iter_content.return_value = iter([])
    response.raw = None
    return response


@pytest.fixture
def mock_session(mock_response):
    """Session whose send() returns mock_response."""
    session = Mock(spec=requests.Session)
    session.prepare_request.return_value = Mock(spec=requests.PreparedRequest)
    session.send.return_value = mock_response
    return session


@pytest.fixture
def mock_stream():
    """Writable destination stream."""
    return Mock()


@pytest.fixture
def mock_stream_provider(mock_stream):
    """Stream provider handing out mock_stream."""
    provider = Mock(spec=StreamProvider)
    provider.open_output_stream.return_value = mock_stream
    return provider


@pytest.fixture
def client(mock_session, mock_stream_provider):
    """Client wired to the mock engine and stream provider."""
    return SimpleHttpClient(session=mock_session, stream_provider=mock_stream_provider)


@pytest.fixture
def request_value():
    """A valid request carrying one header."""
    return SimpleHttpRequest(uri="uri", headers={"name": "value"})


@pytest.fixture
def expected_response():
    """What the client returns for mock_response."""
    return SimpleHttpResponse(status_code=200, status_reason="reason", content=None, headers=())

