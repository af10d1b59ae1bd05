"""
Output stream providers for file downloads.

The client never opens destination files itself; it asks a provider, which
tests replace with a mock.
"""

import os
from pathlib import Path
from typing import BinaryIO, Protocol, Union, runtime_checkable

PathLike = Union[str, "os.PathLike[str]"]


@runtime_checkable
class StreamProvider(Protocol):
    """Opens writable binary streams for destination paths."""

    def open_output_stream(self, path: PathLike) -> BinaryIO:
        """Return an open stream; the caller closes it."""
        ...


class FileStreamProvider:
    """Opens local files for binary writing, truncating existing content."""

    def open_output_stream(self, path: PathLike) -> BinaryIO:
        destination = Path(path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        return open(destination, "wb")
