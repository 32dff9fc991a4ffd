"""Test configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
import structlog

from logforge.core.domain.enums import LogCategory
from logforge.core.domain.log_entry import LogEntry
from logforge.infrastructure.diagnostics import configure_diagnostics


class RecordingSink:
    """Sink that keeps delivered lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def deliver(self, line: str) -> None:
        self.lines.append(line)


class FailingSink:
    """Sink whose delivery always fails with an OSError."""

    def __init__(self) -> None:
        self.attempts = 0

    def deliver(self, line: str) -> None:
        self.attempts += 1
        raise OSError("disk full")


@pytest.fixture(autouse=True)
def _reset_diagnostics():
    """Undo any structlog or diagnostics-level change a test applied."""
    yield
    structlog.reset_defaults()
    configure_diagnostics("WARNING")


@pytest.fixture
def fixed_timestamp() -> datetime:
    return datetime(2024, 3, 1, 12, 30, 45, 123456, tzinfo=UTC)


@pytest.fixture
def hello_entry(fixed_timestamp: datetime) -> LogEntry:
    return LogEntry(
        category=LogCategory.INFO,
        message="Hello World",
        timestamp=fixed_timestamp,
    )


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()
