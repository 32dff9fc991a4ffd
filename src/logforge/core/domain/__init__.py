"""
Core domain models for logforge.

``Logger`` lives in ``logforge.core.domain.logger`` and is not re-exported
here, since the protocol modules import ``LogEntry`` from this package.
"""

from logforge.core.domain.enums import FormatterKind, LogCategory, SinkKind
from logforge.core.domain.errors import (
    ConfigurationError,
    DecodeError,
    LogforgeError,
    SettingsError,
)
from logforge.core.domain.log_entry import LogEntry

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "FormatterKind",
    "LogCategory",
    "LogEntry",
    "LogforgeError",
    "SettingsError",
    "SinkKind",
]
