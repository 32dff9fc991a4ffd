"""Shared UTC time helpers.

Provides a single ``utc_now`` function so that every module that needs the
current UTC timestamp uses the same implementation.
"""

from __future__ import annotations

from datetime import MINYEAR, UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC timestamp."""
    return datetime.now(UTC)


def ensure_aware(value: datetime) -> datetime:
    """Return ``value`` unchanged if timezone-aware, otherwise tag it as UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=UTC)
    return value


def to_utc(value: datetime) -> datetime:
    """Convert ``value`` to UTC, clamping to the representable range.

    An aware timestamp within one UTC offset of ``datetime.min`` or
    ``datetime.max`` has no UTC equivalent; it maps to the nearest bound.
    """
    aware = ensure_aware(value)
    try:
        return aware.astimezone(UTC)
    except OverflowError:
        bound = datetime.min if aware.year == MINYEAR else datetime.max
        return bound.replace(tzinfo=UTC)


def format_iso_millis(value: datetime) -> str:
    """Render a timestamp as UTC ISO-8601 with millisecond precision and ``Z``.

    Example: ``2024-03-01T12:30:45.123Z``. The output has a fixed width and
    sorts lexicographically in time order. Timestamps at the edges of the
    ``datetime`` range are clamped, see ``to_utc``.
    """
    in_utc = to_utc(value)
    return in_utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
