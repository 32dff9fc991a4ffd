"""Domain-specific exception types for logforge."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass
class LogforgeError(Exception):
    """Base exception for logforge errors."""

    message: str
    code: str = "logforge_error"
    details: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class ConfigurationError(LogforgeError):
    """Error raised when a logger is used or built without all its parts."""

    def __init__(
        self,
        message: str,
        *,
        missing: list[str] | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if missing:
            details.setdefault("missing", list(missing))
        self.missing = list(missing or [])
        super().__init__(message=message, code="configuration_error", details=details)


class DecodeError(LogforgeError):
    """Error raised when a rendered line cannot be decoded into an entry."""

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if line is not None:
            details.setdefault("line", line)
        self.line = line
        super().__init__(message=message, code="decode_error", details=details)


class SettingsError(LogforgeError):
    """Error raised when logger settings cannot be loaded or validated."""

    def __init__(
        self,
        message: str,
        *,
        file_path: Path | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if file_path is not None:
            details.setdefault("file_path", str(file_path))
        self.file_path = file_path

        parts = []
        if file_path is not None:
            parts.append(f"File: {file_path}")
        parts.append(message)

        super().__init__(message=" | ".join(parts), code="settings_error", details=details)
