"""
Structured (JSON) formatter.

Each entry becomes a one-line JSON object:

    {"category": "info", "message": "Hello World", "timestamp": "2024-03-01T12:30:45.123456+00:00"}

The timestamp keeps full precision and its UTC offset, so ``parse`` recovers
an entry equal to the one that was rendered.
"""

from __future__ import annotations

import json

from logforge.core.domain.errors import DecodeError
from logforge.core.domain.log_entry import LogEntry


class StructuredFormatter:
    """Render entries as JSON lines and decode them back."""

    def render(self, entry: LogEntry) -> str:
        """Render ``entry`` as a single-line JSON object."""
        return json.dumps(entry.to_dict(), ensure_ascii=False)

    def parse(self, line: str) -> LogEntry:
        """
        Decode a line produced by ``render``.

        Args:
            line: JSON line, optionally with a trailing newline

        Returns:
            The decoded LogEntry

        Raises:
            DecodeError: If the line is not a JSON object with valid
                ``category``, ``message`` and ``timestamp`` fields.
        """
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Invalid JSON log line: {e.msg}", line=line) from e

        if not isinstance(data, dict):
            raise DecodeError("JSON log line must be an object", line=line)

        try:
            return LogEntry.from_dict(data)
        except KeyError as e:
            raise DecodeError(f"Missing field: {e.args[0]}", line=line) from e
        except (TypeError, ValueError) as e:
            raise DecodeError(str(e), line=line) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
