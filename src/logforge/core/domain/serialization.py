"""
Serialization Utilities
========================

Helper functions shared by the dataclass ``to_dict``/``from_dict`` methods
and the line decoders.

Usage:
    from logforge.core.domain.serialization import parse_enum, parse_timestamp

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogEntry":
        return cls(
            category=parse_enum(data["category"], LogCategory),
            message=data["message"],
            timestamp=parse_timestamp(data["timestamp"]),
        )
"""

from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=Enum)


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Parse a timestamp from an ISO-8601 string or datetime.

    A trailing ``Z`` is accepted as UTC.

    Args:
        value: ISO format string or datetime object

    Returns:
        datetime object

    Raises:
        ValueError: If the string is not a valid ISO-8601 timestamp.
        TypeError: If value is neither a string nor a datetime.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected ISO timestamp string, got {type(value).__name__}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_enum(value: str | E, enum_class: type[E]) -> E:
    """
    Parse an enum value from string or enum.

    Args:
        value: String value or enum instance
        enum_class: The Enum class to parse into

    Returns:
        Enum instance

    Raises:
        ValueError: If the value is not a member of ``enum_class``.
    """
    if isinstance(value, enum_class):
        return value
    return enum_class(value)


def serialize_value(value: Any) -> Any:
    """Convert datetimes and enums into JSON-friendly primitives."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value
