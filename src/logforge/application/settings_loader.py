"""
Settings Loader
===============

Loads logger settings from YAML files and validates them against
``LoggerSettings``.

A settings file may either hold the fields at the top level:

    sink: text_file
    formatter: json
    file_path: logs/app.log

or nest them under a ``logger:`` section, so the logger block can live in a
larger application config.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from logforge.application.builder import LoggerBuilder
from logforge.core.domain.config_schema import LoggerSettings, validate_logger_settings
from logforge.core.domain.errors import SettingsError
from logforge.core.domain.logger import Logger
from logforge.infrastructure.diagnostics import configure_diagnostics, get_logger

logger = get_logger(__name__)

LOGGER_SECTION = "logger"


class SettingsLoader:
    """Load and validate logger settings from a config directory.

    Args:
        config_dir: Directory containing ``<name>.yaml`` settings files.
    """

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = Path(config_dir)
        self._logger = logger.bind(component="settings_loader")

    def load(self, name: str) -> LoggerSettings:
        """Load settings by name from ``{config_dir}/{name}.yaml``.

        Args:
            name: Settings file name without extension.

        Returns:
            Validated LoggerSettings. An empty file yields the defaults.

        Raises:
            SettingsError: If the file is missing, unreadable, not valid YAML
                or fails validation.
        """
        path = self._config_dir / f"{name}.yaml"
        if not path.exists():
            raise SettingsError("Settings file not found", file_path=path)

        try:
            with open(path, encoding="utf-8") as f:
                raw: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML: {e}", file_path=path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsError(f"Cannot read settings: {e}", file_path=path) from e

        data = self._extract_section(raw)
        settings = validate_logger_settings(data, file_path=path)

        self._logger.debug(
            "settings_loaded",
            name=name,
            path=str(path),
            sink=settings.sink.value,
            formatter=settings.formatter.value,
        )
        return settings

    @staticmethod
    def defaults() -> LoggerSettings:
        """Return the default settings (console sink, plain formatter)."""
        return LoggerSettings()

    @staticmethod
    def _extract_section(raw: Any) -> Any:
        if raw is None:
            return {}
        if isinstance(raw, dict) and LOGGER_SECTION in raw:
            section = raw[LOGGER_SECTION]
            return {} if section is None else section
        return raw


def build_logger_from_settings(settings: LoggerSettings) -> Logger:
    """Build a Logger from ``settings`` and apply its diagnostics level.

    The level only affects the ``logforge`` logger hierarchy; the host
    application's structlog and logging configuration is left as it is.
    """
    configure_diagnostics(settings.diagnostics_level)
    return LoggerBuilder.from_settings(settings).build()
