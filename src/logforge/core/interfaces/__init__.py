"""
Core Protocol Interfaces

Protocols for the two swappable parts of a Logger. Any object with the
matching method plugs in; the bundled implementations live in
``logforge.infrastructure``.

Available Protocols:
    - SinkProtocol: Delivers a finished line somewhere
    - FormatterProtocol: Renders a LogEntry into a line

Usage:
    from logforge.core.interfaces import FormatterProtocol, SinkProtocol

    class ListSink:
        def __init__(self) -> None:
            self.lines: list[str] = []

        def deliver(self, line: str) -> None:
            self.lines.append(line)
"""

from logforge.core.interfaces.formatter import FormatterProtocol
from logforge.core.interfaces.sink import SinkProtocol

__all__ = [
    "FormatterProtocol",
    "SinkProtocol",
]
