"""
Log Entry Model

The structured record handed to a formatter. Entries are immutable: once
created they are rendered once and discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from logforge.core.domain.enums import LogCategory
from logforge.core.domain.serialization import (
    parse_enum,
    parse_timestamp,
    serialize_value,
)
from logforge.core.utils.time import ensure_aware, utc_now


@dataclass(frozen=True)
class LogEntry:
    """
    A single log event.

    Attributes:
        category: One of ``info``, ``error`` or ``debug``
        message: Raw message text, never escaped
        timestamp: Point in time of the event; naive values are taken as UTC
    """

    category: LogCategory
    message: str
    timestamp: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", parse_enum(self.category, LogCategory))
        object.__setattr__(self, "timestamp", ensure_aware(self.timestamp))

    @classmethod
    def now(cls, category: LogCategory | str, message: str) -> "LogEntry":
        """Create an entry stamped with the current UTC time."""
        return cls(category=category, message=message, timestamp=utc_now())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "category": serialize_value(self.category),
            "message": self.message,
            "timestamp": serialize_value(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogEntry":
        """Create an entry from a dictionary produced by ``to_dict``.

        Raises:
            KeyError: If a field is missing.
            TypeError: If ``message`` is not a string.
            ValueError: If the category or timestamp cannot be parsed.
        """
        message = data["message"]
        if not isinstance(message, str):
            raise TypeError(f"message must be a string, got {type(message).__name__}")
        return cls(
            category=parse_enum(data["category"], LogCategory),
            message=message,
            timestamp=parse_timestamp(data["timestamp"]),
        )
