"""Bundled formatter implementations."""

from logforge.infrastructure.formatters.json_formatter import StructuredFormatter
from logforge.infrastructure.formatters.plain_formatter import PlainFormatter

__all__ = ["PlainFormatter", "StructuredFormatter"]
