"""
Logger Builder
==============

Fluent, incremental construction of a Logger.

Usage:
    logger = (
        LoggerBuilder()
        .set_sink(ConsoleSink())
        .set_formatter(PlainFormatter())
        .build()
    )

``set_sink`` and ``set_formatter`` may be called in any order; a later call
replaces the earlier value for the same part. ``build`` fails fast with
``ConfigurationError`` when a part is missing, so an incomplete Logger is
never handed out. No defaults are filled in and no compatibility check
between sink and formatter is made.
"""

from __future__ import annotations

from logforge.application.factory import create_formatter, create_sink
from logforge.core.domain.config_schema import LoggerSettings
from logforge.core.domain.errors import ConfigurationError
from logforge.core.domain.logger import Logger
from logforge.core.interfaces.formatter import FormatterProtocol
from logforge.core.interfaces.sink import SinkProtocol
from logforge.infrastructure.diagnostics import get_logger

logger = get_logger(__name__)


class LoggerBuilder:
    """Accumulate a sink and a formatter, then build a Logger."""

    def __init__(self) -> None:
        self._sink: SinkProtocol | None = None
        self._formatter: FormatterProtocol | None = None

    @classmethod
    def from_settings(cls, settings: LoggerSettings) -> "LoggerBuilder":
        """Create a builder pre-populated from validated settings."""
        return (
            cls()
            .set_sink(create_sink(settings.sink, file_path=settings.file_path))
            .set_formatter(create_formatter(settings.formatter))
        )

    @property
    def has_sink(self) -> bool:
        return self._sink is not None

    @property
    def has_formatter(self) -> bool:
        return self._formatter is not None

    def set_sink(self, sink: SinkProtocol) -> "LoggerBuilder":
        """Set the sink. Returns this builder."""
        self._sink = sink
        return self

    def set_formatter(self, formatter: FormatterProtocol) -> "LoggerBuilder":
        """Set the formatter. Returns this builder."""
        self._formatter = formatter
        return self

    def build(self) -> Logger:
        """
        Create a Logger from the accumulated parts.

        Each call returns a new Logger; the builder can keep being used.

        Raises:
            ConfigurationError: If the sink or the formatter was never set.
        """
        missing = []
        if self._sink is None:
            missing.append("sink")
        if self._formatter is None:
            missing.append("formatter")
        if missing:
            raise ConfigurationError(
                f"Cannot build logger, missing: {', '.join(missing)}",
                missing=missing,
            )

        built = Logger(sink=self._sink, formatter=self._formatter)
        logger.debug("logger_built", sink=repr(self._sink), formatter=repr(self._formatter))
        return built
