"""
logforge - pluggable loggers built from a sink and a formatter.

Usage:
    from logforge import LogEntry, LoggerBuilder, ConsoleSink, PlainFormatter

    logger = LoggerBuilder().set_sink(ConsoleSink()).set_formatter(PlainFormatter()).build()
    logger.info("Hello World")

    # or by key
    from logforge import create_logger
    logger = create_logger("text_file", "json", file_path="logs/app.log")
"""

from logforge.application.builder import LoggerBuilder
from logforge.application.factory import (
    create_component,
    create_formatter,
    create_logger,
    create_sink,
)
from logforge.application.settings_loader import SettingsLoader, build_logger_from_settings
from logforge.core.domain import (
    ConfigurationError,
    DecodeError,
    FormatterKind,
    LogCategory,
    LogEntry,
    LogforgeError,
    SettingsError,
    SinkKind,
)
from logforge.core.domain.config_schema import LoggerSettings
from logforge.core.domain.logger import Logger
from logforge.core.interfaces import FormatterProtocol, SinkProtocol
from logforge.infrastructure.diagnostics import configure_diagnostics
from logforge.infrastructure.formatters import PlainFormatter, StructuredFormatter
from logforge.infrastructure.sinks import ConsoleSink, FileSink

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ConsoleSink",
    "DecodeError",
    "FileSink",
    "FormatterKind",
    "FormatterProtocol",
    "LogCategory",
    "LogEntry",
    "Logger",
    "LoggerBuilder",
    "LoggerSettings",
    "LogforgeError",
    "PlainFormatter",
    "SettingsError",
    "SettingsLoader",
    "SinkKind",
    "SinkProtocol",
    "StructuredFormatter",
    "__version__",
    "build_logger_from_settings",
    "configure_diagnostics",
    "create_component",
    "create_formatter",
    "create_logger",
    "create_sink",
]
