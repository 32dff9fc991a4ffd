"""
Formatter Protocol Interface

Defines the contract for turning a structured LogEntry into a text line.
"""

from typing import Protocol, runtime_checkable

from logforge.core.domain.log_entry import LogEntry


@runtime_checkable
class FormatterProtocol(Protocol):
    """Protocol for log entry formatters.

    Implementations must be pure: the same entry always renders to the
    same line and rendering has no side effects.
    """

    def render(self, entry: LogEntry) -> str:
        """
        Render an entry as a single text line.

        Args:
            entry: The entry to render

        Returns:
            Rendered line without a trailing newline
        """
        ...
