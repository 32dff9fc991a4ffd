"""Console sink: writes each line to standard output."""

from __future__ import annotations

from typing import TextIO


class ConsoleSink:
    """
    Sink that prints one line per delivery.

    Without an explicit stream the *current* ``sys.stdout`` is used at
    delivery time, so redirected or captured stdout is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def deliver(self, line: str) -> None:
        """Write ``line`` followed by a newline."""
        print(line, file=self._stream)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
