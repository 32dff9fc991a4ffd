"""Tests for the shared time helpers."""

from datetime import UTC, datetime, timedelta, timezone

from logforge.core.utils.time import ensure_aware, format_iso_millis, to_utc, utc_now


def test_utc_now_returns_aware_utc_datetime() -> None:
    """utc_now() must return a timezone-aware datetime in UTC."""
    now = utc_now()
    assert isinstance(now, datetime)
    assert now.tzinfo is not None
    assert now.tzinfo == UTC


def test_ensure_aware_tags_naive_as_utc() -> None:
    naive = datetime(2024, 3, 1, 12, 0, 0)
    aware = ensure_aware(naive)
    assert aware.tzinfo == UTC
    assert aware.replace(tzinfo=None) == naive


def test_ensure_aware_keeps_existing_offset() -> None:
    plus_two = timezone(timedelta(hours=2))
    value = datetime(2024, 3, 1, 12, 0, 0, tzinfo=plus_two)
    assert ensure_aware(value) is value


def test_format_iso_millis_utc() -> None:
    value = datetime(2024, 3, 1, 12, 30, 45, 123456, tzinfo=UTC)
    assert format_iso_millis(value) == "2024-03-01T12:30:45.123Z"


def test_format_iso_millis_converts_offset_to_utc() -> None:
    plus_two = timezone(timedelta(hours=2))
    value = datetime(2024, 3, 1, 14, 30, 45, 7000, tzinfo=plus_two)
    assert format_iso_millis(value) == "2024-03-01T12:30:45.007Z"


def test_format_iso_millis_zero_fraction() -> None:
    value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert format_iso_millis(value) == "2024-01-02T03:04:05.000Z"


def test_format_iso_millis_sorts_in_time_order() -> None:
    earlier = datetime(2024, 1, 9, 23, 59, 59, 999000, tzinfo=UTC)
    later = datetime(2024, 1, 10, 0, 0, 0, tzinfo=UTC)
    assert format_iso_millis(earlier) < format_iso_millis(later)


def test_to_utc_clamps_below_range() -> None:
    value = datetime.min.replace(tzinfo=timezone(timedelta(hours=1)))
    assert to_utc(value) == datetime.min.replace(tzinfo=UTC)


def test_to_utc_clamps_above_range() -> None:
    value = datetime.max.replace(tzinfo=timezone(timedelta(hours=-1)))
    assert to_utc(value) == datetime.max.replace(tzinfo=UTC)


def test_format_iso_millis_at_range_edges() -> None:
    low = datetime.min.replace(tzinfo=timezone(timedelta(hours=1)))
    high = datetime.max.replace(tzinfo=timezone(timedelta(hours=-1)))
    assert format_iso_millis(low) == "0001-01-01T00:00:00.000Z"
    assert format_iso_millis(high) == "9999-12-31T23:59:59.999Z"
