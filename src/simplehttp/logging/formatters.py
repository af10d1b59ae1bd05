"""
Log formatters for the SimpleHTTP handlers.

The client attaches the request method, URI, status and transferred byte count
to its records through ``extra=``. The JSON formatter emits those attributes as
top-level fields and the console formatter appends them as ``key=value`` pairs.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from rich.console import Console
from rich.logging import RichHandler

from simplehttp.constants import HTTP_LOG_FIELDS

CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def http_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Request attributes the client attached to ``record``, in field order."""
    return {
        name: getattr(record, name)
        for name in HTTP_LOG_FIELDS
        if getattr(record, name, None) is not None
    }


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with the request fields at top level."""

    def __init__(self, service_name: str = "simplehttp", version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_entry.update(http_fields(record))

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable lines; request fields are appended when present."""

    def __init__(self):
        super().__init__(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = http_fields(record)
        if fields:
            pairs = " ".join(f"{name}={value}" for name, value in fields.items())
            line = f"{line} [{pairs}]"
        return line


def create_formatter(format_type: str, service_name: str, version: str) -> logging.Formatter:
    """Formatter for a stream or file handler. Rich falls back to console lines."""
    if format_type == "json":
        return StructuredFormatter(service_name, version)
    return ConsoleFormatter()


def create_rich_handler() -> logging.Handler:
    """Rich handler on stderr, so response bodies on stdout stay clean."""
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
