"""
Diagnostics configuration.

logforge reports on itself (component creation, factory fallbacks, settings
loading) through structlog. These diagnostics are separate from the lines a
Logger delivers and are never used to report a failed delivery.

The library loggers are structlog wrappers around the stdlib ``logforge``
logger hierarchy. That hierarchy carries a ``NullHandler`` and sits at
``WARNING`` until the caller opts in with ``configure_diagnostics``, so an
unconfigured process never sees debug chatter on stdout. Where the records
end up is decided by the host application's ``logging`` handlers.
"""

from __future__ import annotations

import logging

import structlog

LOGGER_NAME = "logforge"
DEFAULT_LEVEL = logging.WARNING

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_root = logging.getLogger(LOGGER_NAME)
_root.addHandler(logging.NullHandler())
_root.setLevel(DEFAULT_LEVEL)


def resolve_level(level: str) -> int:
    """
    Map a level name to its numeric ``logging`` value.

    Raises:
        ValueError: If the level name is unknown.
    """
    normalized = level.strip().upper()
    if normalized not in _LEVELS:
        raise ValueError(
            f"Invalid diagnostics level: {level}. "
            f"Supported values: {', '.join(_LEVELS)}"
        )
    return _LEVELS[normalized]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``.

    ``name`` should live under ``logforge`` so it inherits the diagnostics
    level. Processors are read from the global structlog configuration.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_diagnostics(level: str = "WARNING") -> None:
    """Emit logforge diagnostics at ``level`` and above.

    Only the ``logforge`` logger hierarchy is touched. The global structlog
    configuration and other stdlib loggers keep whatever the host set.
    """
    _root.setLevel(resolve_level(level))
