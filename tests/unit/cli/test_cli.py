"""
Unit tests for the SimpleHTTP command line.
"""

from unittest.mock import Mock, patch

import click
import pytest
import requests
from click.testing import CliRunner

from simplehttp.cli.main import cli, parse_headers
from simplehttp.client import SimpleHttpClient
from simplehttp.exceptions import ConfigurationValidationError, InvalidArgumentError
from simplehttp.models import Header, SimpleHttpRequest, SimpleHttpResponse


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def mock_client():
    """Client double returning a 200 JSON response."""
    client = Mock(spec=SimpleHttpClient)
    response = SimpleHttpResponse(
        200, "OK", '{"ok": true}', (Header("Content-Type", "application/json"),)
    )
    for name in ("get", "post", "put", "delete", "put_file"):
        getattr(client, name).return_value = response
    client.get_file.return_value = SimpleHttpResponse(200, "OK", None, ())
    return client


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from installing root logger handlers during tests."""
    with patch("simplehttp.cli.main.setup_logging") as mock_setup:
        yield mock_setup


def invoke(runner, mock_client, args):
    return runner.invoke(cli, args, obj={"client": mock_client})


@pytest.mark.unit
class TestParseHeaders:
    """Test parsing -H options."""

    def test_parses_pairs(self):
        assert parse_headers(("Accept: text/csv", "X-Id:42")) == {
            "Accept": "text/csv",
            "X-Id": "42",
        }

    def test_value_may_contain_colons(self):
        assert parse_headers(("Authorization: Basic a:b",)) == {"Authorization": "Basic a:b"}

    @pytest.mark.parametrize("raw", ["no-colon", ": value"])
    def test_malformed(self, raw):
        with pytest.raises(click.BadParameter):
            parse_headers((raw,))


@pytest.mark.unit
class TestCommands:
    """Test each command drives the client."""

    def test_get(self, runner, mock_client):
        result = invoke(runner, mock_client, ["get", "https://example.com/a", "-H", "Accept: application/json"])

        assert result.exit_code == 0
        mock_client.get.assert_called_once_with(
            SimpleHttpRequest("https://example.com/a", {"Accept": "application/json"})
        )
        assert "200 OK" in result.output
        assert '{"ok": true}' in result.output

    def test_include_headers(self, runner, mock_client):
        result = invoke(runner, mock_client, ["get", "https://example.com/a", "-i"])

        assert result.exit_code == 0
        assert "Content-Type" in result.output
        assert "application/json" in result.output

    def test_delete(self, runner, mock_client):
        result = invoke(runner, mock_client, ["delete", "https://example.com/a/1"])

        assert result.exit_code == 0
        mock_client.delete.assert_called_once_with(SimpleHttpRequest("https://example.com/a/1", {}))

    def test_post_with_body(self, runner, mock_client):
        result = invoke(runner, mock_client, ["post", "https://example.com/a", "-d", '{"x": 1}'])

        assert result.exit_code == 0
        mock_client.post.assert_called_once_with(
            SimpleHttpRequest("https://example.com/a", {}), '{"x": 1}'
        )

    def test_put_without_body(self, runner, mock_client):
        result = invoke(runner, mock_client, ["put", "https://example.com/a"])

        assert result.exit_code == 0
        mock_client.put.assert_called_once_with(SimpleHttpRequest("https://example.com/a", {}), None)

    def test_upload(self, runner, mock_client, tmp_path):
        source = tmp_path / "payload.bin"
        source.write_bytes(b"data")

        result = invoke(runner, mock_client, ["upload", "https://example.com/f", str(source)])

        assert result.exit_code == 0
        mock_client.put_file.assert_called_once_with(
            SimpleHttpRequest("https://example.com/f", {}), source
        )

    def test_upload_missing_file(self, runner, mock_client, tmp_path):
        result = invoke(runner, mock_client, ["upload", "https://example.com/f", str(tmp_path / "nope")])

        assert result.exit_code == 2
        mock_client.put_file.assert_not_called()

    def test_download(self, runner, mock_client, tmp_path):
        destination = tmp_path / "out.csv"

        result = invoke(runner, mock_client, ["download", "https://example.com/f.csv", str(destination)])

        assert result.exit_code == 0
        mock_client.get_file.assert_called_once_with(
            SimpleHttpRequest("https://example.com/f.csv", {}), destination
        )
        assert "Saved to" in result.output


@pytest.mark.unit
class TestErrorHandling:
    """Test error reporting and exit codes."""

    def test_bad_header_is_usage_error(self, runner, mock_client):
        result = invoke(runner, mock_client, ["get", "https://example.com", "-H", "broken"])

        assert result.exit_code == 2
        mock_client.get.assert_not_called()

    def test_library_error(self, runner, mock_client):
        mock_client.get.side_effect = InvalidArgumentError("request.uri")

        result = invoke(runner, mock_client, ["get", "x"])

        assert result.exit_code == 1
        assert "request.uri cannot be None" in result.output

    def test_help_text_printed_literally(self, runner, mock_client):
        mock_client.get.side_effect = ConfigurationValidationError(
            ["http.connect_timeout_ms: bad"], "/tmp/[prod]/config.toml"
        )

        result = invoke(runner, mock_client, ["get", "https://example.com"])

        assert result.exit_code == 1
        assert "Help: Fix the validation errors listed above in /tmp/[prod]/config.toml" in result.output

    def test_transport_error(self, runner, mock_client):
        mock_client.get.side_effect = requests.ConnectionError("connection refused")

        result = invoke(runner, mock_client, ["get", "https://example.com"])

        assert result.exit_code == 1
        assert "connection refused" in result.output

    def test_error_status_is_not_a_failure(self, runner, mock_client):
        mock_client.get.return_value = SimpleHttpResponse(404, "Not Found", "missing", ())

        result = invoke(runner, mock_client, ["get", "https://example.com/x"])

        assert result.exit_code == 0
        assert "404 Not Found" in result.output


@pytest.mark.unit
def test_builds_client_from_config(runner, tmp_path, no_logging_setup):
    """Test the group builds a client from the config file when none is injected."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("[http]\nconnect_timeout_ms = 3000\n")

    with patch("simplehttp.cli.main.SimpleHttpClient") as client_class:
        client_class.return_value.get.return_value = SimpleHttpResponse(200, "OK", None, ())
        result = runner.invoke(cli, ["--config", str(config_file), "-v", "get", "https://example.com"], obj={})

    assert result.exit_code == 0, result.output
    config = client_class.call_args[0][0]
    assert config.connect_timeout_ms == 3000
    client_class.return_value.close.assert_called_once()
    assert no_logging_setup.call_args[0][1] == 1
