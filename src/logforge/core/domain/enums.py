"""
Core Domain Enums

Defines log categories and the closed set of sink and formatter variants
so that keys are never compared as bare strings in the library.
"""

from enum import Enum


class LogCategory(str, Enum):
    """Category of a log entry."""

    INFO = "info"
    ERROR = "error"
    DEBUG = "debug"


class SinkKind(str, Enum):
    """Available sink variants."""

    CONSOLE = "console"
    TEXT_FILE = "text_file"


class FormatterKind(str, Enum):
    """Available formatter variants."""

    JSON = "json"
    PLAIN = "plain"
