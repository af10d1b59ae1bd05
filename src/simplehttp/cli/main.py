"""SimpleHTTP CLI entry point.

Ad-hoc GET/POST/PUT/DELETE calls and file transfers from the shell.
"""

import logging
import sys
from functools import wraps
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
import requests
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..client import SimpleHttpClient
from ..config import ConfigManager
from ..exceptions import SimpleHttpError
from ..logging import LoggingConfig, configure_logging
from ..models import SimpleHttpRequest, SimpleHttpResponse

console = Console()
logger = logging.getLogger(__name__)

VERBOSITY_LEVELS = {0: None, 1: "INFO"}


def parse_headers(values: Tuple[str, ...]) -> Dict[str, str]:
    """Parse repeated ``Name: value`` options; later names overwrite earlier ones."""
    headers = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"expected 'Name: value', got {raw!r}", param_hint="'-H' / '--header'"
            )
        headers[name.strip()] = value.strip()
    return headers


def handle_cli_errors(func):
    """Report library and transport errors and exit with status 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SimpleHttpError as e:
            logger.debug(f"Command failed: {e.to_dict()}", exc_info=True)
            _print_error(f"Error: {e.message}")
            if e.help_text:
                console.print(
                    f"Help: {e.help_text}", style="blue", markup=False, highlight=False
                )
            sys.exit(1)
        except requests.RequestException as e:
            logger.debug("Request failed", exc_info=True)
            _print_error(f"Request failed: {e}")
            sys.exit(1)
        except OSError as e:
            logger.debug("I/O failure", exc_info=True)
            _print_error(f"I/O error: {e}")
            sys.exit(1)

    return wrapper


def _print_error(message: str) -> None:
    console.print(message, style="red", markup=False, highlight=False)


def setup_logging(config_manager: ConfigManager, verbose: int) -> None:
    """Install handlers from the configured logging options."""
    options = config_manager.load_config().logging
    logging_config = LoggingConfig.from_options(options)
    level = "DEBUG" if verbose > 1 else VERBOSITY_LEVELS.get(verbose)
    if level:
        logging_config.level = getattr(logging, level)
    configure_logging(logging_config)


def print_response(response: SimpleHttpResponse, show_headers: bool) -> None:
    """Render the status line, optional headers and the body."""
    style = "green" if response.status_code < 400 else "red"
    console.print(
        f"{response.status_code} {response.status_reason or ''}".rstrip(),
        style=style,
        markup=False,
        highlight=False,
    )
    if show_headers and response.headers:
        table = Table(show_header=False, box=None)
        for header in response.headers:
            table.add_row(header.name, header.value)
        console.print(table)
    if response.content is not None:
        console.print(response.content, markup=False, highlight=False, soft_wrap=True)


def _build_request(uri: str, header: Tuple[str, ...]) -> SimpleHttpRequest:
    return SimpleHttpRequest(uri=uri, headers=parse_headers(header))


header_option = click.option(
    "--header", "-H", multiple=True, help="Request header as 'Name: value' (repeatable)"
)
include_option = click.option(
    "--include", "-i", is_flag=True, help="Show response headers"
)
data_option = click.option("--data", "-d", default=None, help="Text request body")


@click.group()
@click.version_option(version=__version__, prog_name="simplehttp")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path"
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.pass_context
@handle_cli_errors
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """SimpleHTTP: issue HTTP calls through the SimpleHTTP client.

    \b
    Examples:
        simplehttp get https://httpbin.org/get -i
        simplehttp post https://httpbin.org/post -d '{"a": 1}'
        simplehttp download https://example.com/data.csv data.csv
    """
    ctx.ensure_object(dict)
    config_manager = ConfigManager(config)
    setup_logging(config_manager, verbose)

    if "client" not in ctx.obj:
        client = SimpleHttpClient(config_manager.load_config().http)
        ctx.call_on_close(client.close)
        ctx.obj["client"] = client


@cli.command()
@click.argument("uri")
@header_option
@include_option
@click.pass_obj
@handle_cli_errors
def get(obj: dict, uri: str, header: Tuple[str, ...], include: bool) -> None:
    """Send a GET request."""
    response = obj["client"].get(_build_request(uri, header))
    print_response(response, include)


@cli.command()
@click.argument("uri")
@header_option
@include_option
@click.pass_obj
@handle_cli_errors
def delete(obj: dict, uri: str, header: Tuple[str, ...], include: bool) -> None:
    """Send a DELETE request."""
    response = obj["client"].delete(_build_request(uri, header))
    print_response(response, include)


@cli.command()
@click.argument("uri")
@header_option
@data_option
@include_option
@click.pass_obj
@handle_cli_errors
def post(
    obj: dict, uri: str, header: Tuple[str, ...], data: Optional[str], include: bool
) -> None:
    """Send a POST request. The body defaults to application/json."""
    response = obj["client"].post(_build_request(uri, header), data)
    print_response(response, include)


@cli.command()
@click.argument("uri")
@header_option
@data_option
@include_option
@click.pass_obj
@handle_cli_errors
def put(
    obj: dict, uri: str, header: Tuple[str, ...], data: Optional[str], include: bool
) -> None:
    """Send a PUT request. The body defaults to application/json."""
    response = obj["client"].put(_build_request(uri, header), data)
    print_response(response, include)


@cli.command()
@click.argument("uri")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@header_option
@include_option
@click.pass_obj
@handle_cli_errors
def upload(
    obj: dict, uri: str, source: Path, header: Tuple[str, ...], include: bool
) -> None:
    """PUT the contents of SOURCE to URI."""
    response = obj["client"].put_file(_build_request(uri, header), source)
    print_response(response, include)


@cli.command()
@click.argument("uri")
@click.argument("destination", type=click.Path(dir_okay=False, path_type=Path))
@header_option
@include_option
@click.pass_obj
@handle_cli_errors
def download(
    obj: dict, uri: str, destination: Path, header: Tuple[str, ...], include: bool
) -> None:
    """GET URI and write the body to DESTINATION."""
    response = obj["client"].get_file(_build_request(uri, header), destination)
    print_response(response, include)
    console.print(f"Saved to {destination}", style="blue", markup=False, highlight=False)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
