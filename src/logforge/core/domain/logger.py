"""
Logger
======

Composes exactly one sink with exactly one formatter. Both parts are fixed
when the Logger is created; there are no setters.

A Logger created without one of its parts is allowed to exist, but every
``log`` call on it fails with ``ConfigurationError`` before any output is
produced. ``LoggerBuilder`` refuses to create such a Logger in the first
place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logforge.core.domain.enums import LogCategory
from logforge.core.domain.errors import ConfigurationError
from logforge.core.domain.log_entry import LogEntry

if TYPE_CHECKING:
    from logforge.core.interfaces.formatter import FormatterProtocol
    from logforge.core.interfaces.sink import SinkProtocol


class Logger:
    """Render entries with a formatter and deliver them through a sink."""

    def __init__(
        self,
        sink: SinkProtocol | None = None,
        formatter: FormatterProtocol | None = None,
    ) -> None:
        self._sink = sink
        self._formatter = formatter

    @property
    def sink(self) -> SinkProtocol | None:
        return self._sink

    @property
    def formatter(self) -> FormatterProtocol | None:
        return self._formatter

    @property
    def is_configured(self) -> bool:
        """True when both sink and formatter are present."""
        return self._sink is not None and self._formatter is not None

    def missing_parts(self) -> list[str]:
        """Names of the parts that are not set, in ``sink, formatter`` order."""
        missing = []
        if self._sink is None:
            missing.append("sink")
        if self._formatter is None:
            missing.append("formatter")
        return missing

    def log(self, entry: LogEntry) -> None:
        """
        Render ``entry`` and deliver the resulting line.

        Args:
            entry: The entry to log

        Raises:
            ConfigurationError: If sink or formatter is unset. No output is
                produced in that case.
            OSError: If the sink fails to deliver. Not retried.
        """
        if self._sink is None or self._formatter is None:
            raise ConfigurationError(
                "logger not fully configured", missing=self.missing_parts()
            )

        line = self._formatter.render(entry)
        self._sink.deliver(line)

    def info(self, message: str) -> None:
        """Log ``message`` in the ``info`` category, stamped now."""
        self.log(LogEntry.now(LogCategory.INFO, message))

    def error(self, message: str) -> None:
        """Log ``message`` in the ``error`` category, stamped now."""
        self.log(LogEntry.now(LogCategory.ERROR, message))

    def debug(self, message: str) -> None:
        """Log ``message`` in the ``debug`` category, stamped now."""
        self.log(LogEntry.now(LogCategory.DEBUG, message))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sink={self._sink!r}, "
            f"formatter={self._formatter!r})"
        )
