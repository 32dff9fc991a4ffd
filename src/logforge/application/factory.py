"""Logger Factory - symbolic construction of sinks, formatters and loggers.

Keys are resolved to the closed ``SinkKind`` / ``FormatterKind`` variants
first, then each variant maps to exactly one implementation. Unknown keys
do not fail: an unknown sink key resolves to ``SinkKind.TEXT_FILE`` and an
unknown formatter key to ``FormatterKind.PLAIN``.

:func:`create_component` groups both families behind one entry point and
decides from the key alone which family is wanted.
"""

from __future__ import annotations

from pathlib import Path

from logforge.core.domain.config_schema import DEFAULT_LOG_FILE
from logforge.core.domain.enums import FormatterKind, SinkKind
from logforge.core.domain.logger import Logger
from logforge.core.interfaces.formatter import FormatterProtocol
from logforge.core.interfaces.sink import SinkProtocol
from logforge.infrastructure.diagnostics import get_logger
from logforge.infrastructure.formatters import PlainFormatter, StructuredFormatter
from logforge.infrastructure.sinks import ConsoleSink, FileSink

logger = get_logger(__name__)

# Legacy spellings accepted alongside the enum values.
_SINK_ALIASES: dict[str, SinkKind] = {"textFile": SinkKind.TEXT_FILE}
_FORMATTER_ALIASES: dict[str, FormatterKind] = {"simple": FormatterKind.PLAIN}

SINK_KEYS: frozenset[str] = frozenset(
    {kind.value for kind in SinkKind} | set(_SINK_ALIASES)
)


def resolve_sink_kind(key: SinkKind | str) -> SinkKind:
    """Resolve a sink key, falling back to ``SinkKind.TEXT_FILE``."""
    if isinstance(key, SinkKind):
        return key
    if key in _SINK_ALIASES:
        return _SINK_ALIASES[key]
    try:
        return SinkKind(key)
    except ValueError:
        logger.debug("sink_kind_fallback", key=key, resolved=SinkKind.TEXT_FILE.value)
        return SinkKind.TEXT_FILE


def resolve_formatter_kind(key: FormatterKind | str) -> FormatterKind:
    """Resolve a formatter key, falling back to ``FormatterKind.PLAIN``."""
    if isinstance(key, FormatterKind):
        return key
    if key in _FORMATTER_ALIASES:
        return _FORMATTER_ALIASES[key]
    try:
        return FormatterKind(key)
    except ValueError:
        logger.debug(
            "formatter_kind_fallback", key=key, resolved=FormatterKind.PLAIN.value
        )
        return FormatterKind.PLAIN


def create_sink(
    kind: SinkKind | str,
    *,
    file_path: Path | str | None = None,
) -> SinkProtocol:
    """Create a sink.

    Args:
        kind: ``console`` for standard output; any other key gives a
            file sink.
        file_path: Target file for a file sink. Defaults to ``log.txt``.
            Ignored for the console sink.

    Returns:
        SinkProtocol instance.
    """
    resolved = resolve_sink_kind(kind)

    if resolved is SinkKind.CONSOLE:
        sink: SinkProtocol = ConsoleSink()
    elif resolved is SinkKind.TEXT_FILE:
        sink = FileSink(file_path if file_path is not None else DEFAULT_LOG_FILE)
    else:
        raise AssertionError(f"Unhandled sink kind: {resolved!r}")

    logger.debug("sink_created", kind=resolved.value, sink=repr(sink))
    return sink


def create_formatter(kind: FormatterKind | str) -> FormatterProtocol:
    """Create a formatter.

    Args:
        kind: ``json`` for structured output; any other key gives the
            plain formatter.

    Returns:
        FormatterProtocol instance.
    """
    resolved = resolve_formatter_kind(kind)

    if resolved is FormatterKind.JSON:
        formatter: FormatterProtocol = StructuredFormatter()
    elif resolved is FormatterKind.PLAIN:
        formatter = PlainFormatter()
    else:
        raise AssertionError(f"Unhandled formatter kind: {resolved!r}")

    logger.debug("formatter_created", kind=resolved.value)
    return formatter


def is_sink_key(key: SinkKind | FormatterKind | str) -> bool:
    """True if ``key`` belongs to the sink family."""
    if isinstance(key, SinkKind):
        return True
    if isinstance(key, FormatterKind):
        return False
    return key in SINK_KEYS


def create_component(
    key: SinkKind | FormatterKind | str,
    *,
    file_path: Path | str | None = None,
) -> SinkProtocol | FormatterProtocol:
    """Create a sink or a formatter, chosen by the family ``key`` belongs to.

    Keys in :data:`SINK_KEYS` produce a sink; every other key is handed to
    :func:`create_formatter`.
    """
    if is_sink_key(key):
        return create_sink(key, file_path=file_path)
    return create_formatter(key)


def create_logger(
    sink: SinkKind | str = SinkKind.CONSOLE,
    formatter: FormatterKind | str = FormatterKind.PLAIN,
    *,
    file_path: Path | str | None = None,
) -> Logger:
    """Create a ready Logger from a sink key and a formatter key."""
    return Logger(
        sink=create_sink(sink, file_path=file_path),
        formatter=create_formatter(formatter),
    )
