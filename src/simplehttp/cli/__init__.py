"""Command-line interface for SimpleHTTP."""

from .main import cli, main

__all__ = ["cli", "main"]
