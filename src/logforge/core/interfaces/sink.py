"""
Sink Protocol Interface

Defines the contract for destinations that accept a finished text line.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkProtocol(Protocol):
    """Protocol for log line destinations (console, file, ...)."""

    def deliver(self, line: str) -> None:
        """
        Deliver one rendered line.

        Args:
            line: Finished text line, without a trailing newline

        Raises:
            OSError: If the underlying output mechanism fails
        """
        ...
