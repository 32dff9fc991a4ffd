"""Bundled sink implementations."""

from logforge.infrastructure.sinks.console_sink import ConsoleSink
from logforge.infrastructure.sinks.file_sink import FileSink

__all__ = ["ConsoleSink", "FileSink"]
