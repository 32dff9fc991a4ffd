"""
Plain (human-readable) formatter.

Renders ``<timestamp> : [<category>] <message>`` where the timestamp is UTC
ISO-8601 with millisecond precision, e.g.:

    2024-03-01T12:30:45.123Z : [info] Hello World

The message is written as-is. It may contain the delimiter sequences or
newlines; ``parse`` only splits on the first delimiters, which the
timestamp and category never contain.
"""

from __future__ import annotations

import re

from logforge.core.domain.errors import DecodeError
from logforge.core.domain.log_entry import LogEntry
from logforge.core.domain.serialization import parse_timestamp
from logforge.core.utils.time import format_iso_millis

_PLAIN_LINE = re.compile(
    r"^(?P<timestamp>\S+) : \[(?P<category>[a-z]+)\] (?P<message>.*)\Z",
    re.DOTALL,
)


class PlainFormatter:
    """Render entries as ``<timestamp> : [<category>] <message>``."""

    def render(self, entry: LogEntry) -> str:
        """Render ``entry`` as a plain text line."""
        return f"{format_iso_millis(entry.timestamp)} : [{entry.category.value}] {entry.message}"

    def parse(self, line: str) -> LogEntry:
        """
        Decode a line produced by ``render``.

        The timestamp of the result is truncated to milliseconds, as
        rendered.

        Raises:
            DecodeError: If the line does not have the plain shape or its
                timestamp or category is invalid.
        """
        match = _PLAIN_LINE.match(line.removesuffix("\n"))
        if match is None:
            raise DecodeError("Line does not match '<timestamp> : [<category>] <message>'", line=line)

        try:
            return LogEntry(
                category=match.group("category"),
                message=match.group("message"),
                timestamp=parse_timestamp(match.group("timestamp")),
            )
        except ValueError as e:
            raise DecodeError(str(e), line=line) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
