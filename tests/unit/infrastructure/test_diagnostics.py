"""Tests for the logforge diagnostics loggers and their configuration."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from logforge.application.factory import create_logger, create_sink
from logforge.core.domain.log_entry import LogEntry
from logforge.infrastructure.diagnostics import (
    LOGGER_NAME,
    configure_diagnostics,
    get_logger,
    resolve_level,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" Warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
    ],
)
def test_resolve_level(name: str, expected: int) -> None:
    assert resolve_level(name) == expected


def test_resolve_level_unknown_raises() -> None:
    with pytest.raises(ValueError, match="Invalid diagnostics level"):
        resolve_level("TRACE")


class TestDefaults:
    """Behaviour of an unconfigured process."""

    def test_hierarchy_starts_at_warning(self) -> None:
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING
        assert logging.getLogger("logforge.application.factory").getEffectiveLevel() == logging.WARNING

    def test_hierarchy_has_null_handler(self) -> None:
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_console_logger_writes_only_its_line(self, capsys, hello_entry: LogEntry) -> None:
        create_logger("console", "plain").log(hello_entry)

        captured = capsys.readouterr()
        assert captured.out == "2024-03-01T12:30:45.123Z : [info] Hello World\n"
        assert captured.err == ""

    def test_debug_records_are_dropped(self, caplog) -> None:
        create_sink("console")
        assert not [r for r in caplog.records if r.name.startswith(LOGGER_NAME)]


class TestConfigureDiagnostics:
    """Tests for configure_diagnostics."""

    def test_sets_hierarchy_level(self) -> None:
        configure_diagnostics("debug")
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_debug_records_reach_host_handlers(self, caplog) -> None:
        configure_diagnostics("DEBUG")
        create_sink("console")

        records = [r for r in caplog.records if r.name == "logforge.application.factory"]
        assert records
        assert records[0].levelno == logging.DEBUG
        assert "sink_created" in records[0].getMessage()

    def test_leaves_global_structlog_config_alone(self) -> None:
        before = structlog.get_config()["wrapper_class"]
        configure_diagnostics("ERROR")
        assert structlog.get_config()["wrapper_class"] is before

    def test_leaves_other_loggers_alone(self) -> None:
        other = logging.getLogger("host.app")
        other.setLevel(logging.INFO)
        configure_diagnostics("ERROR")
        assert other.level == logging.INFO

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError):
            configure_diagnostics("TRACE")


class TestGetLogger:
    """Tests for get_logger."""

    def test_events_go_through_structlog_processors(self) -> None:
        log = get_logger("logforge.tests")
        with capture_logs() as logs:
            log.info("something_happened", key="value")
        assert logs == [{"event": "something_happened", "key": "value", "log_level": "info"}]

    def test_bind_keeps_context(self) -> None:
        log = get_logger("logforge.tests").bind(component="sample")
        with capture_logs() as logs:
            log.warning("bound_event")
        assert logs[0]["component"] == "sample"
