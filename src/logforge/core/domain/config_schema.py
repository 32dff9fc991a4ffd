"""
Configuration Schema Validation

Pydantic model for validating logger settings loaded from YAML.
Provides clear error messages with file context.

Settings are stricter than the symbolic factory: an unknown sink or
formatter kind is rejected here instead of falling back to a default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from logforge.core.domain.enums import FormatterKind, SinkKind
from logforge.core.domain.errors import SettingsError

# Relative, so it resolves against the cwd when a FileSink is created.
DEFAULT_LOG_FILE = Path("log.txt")


class LoggerSettings(BaseModel):
    """Schema for logger settings."""

    model_config = ConfigDict(extra="forbid")

    sink: SinkKind = Field(
        SinkKind.CONSOLE,
        description="Where rendered lines go: 'console' or 'text_file'",
    )
    formatter: FormatterKind = Field(
        FormatterKind.PLAIN,
        description="How entries are rendered: 'json' or 'plain'",
    )
    file_path: Path = Field(
        DEFAULT_LOG_FILE,
        description="Target file for the text_file sink",
    )
    diagnostics_level: str = Field(
        "WARNING",
        description="Level for logforge's own structlog diagnostics",
        pattern="^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("diagnostics_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: Path) -> Path:
        """Reject empty paths."""
        if str(v).strip() in ("", "."):
            raise ValueError("file_path must name a file")
        return v


def validate_logger_settings(
    data: dict[str, Any],
    file_path: Optional[Path] = None,
) -> LoggerSettings:
    """
    Validate logger settings data.

    Args:
        data: Settings dictionary
        file_path: Optional file path for error messages

    Returns:
        Validated LoggerSettings

    Raises:
        SettingsError: If validation fails
    """
    if not isinstance(data, dict):
        raise SettingsError(
            f"Expected a mapping, got {type(data).__name__}",
            file_path=file_path,
        )
    try:
        return LoggerSettings(**data)
    except Exception as e:
        raise SettingsError(str(e), file_path=file_path) from e
