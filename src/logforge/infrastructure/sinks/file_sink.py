"""
Append-only file sink.

Writes each delivered line, followed by a newline, to a single file
chosen at construction.

Usage:
    sink = FileSink(Path("logs/app.log"))
    sink.deliver("2024-03-01T12:30:45.123Z : [info] started")

The file and any missing parent directories are created on the first
delivery; existing content is never truncated. There is no rotation and no
locking, so only one writer per file is supported.
"""

from __future__ import annotations

from pathlib import Path

from logforge.core.domain.config_schema import DEFAULT_LOG_FILE
from logforge.infrastructure.diagnostics import get_logger

logger = get_logger(__name__)


class FileSink:
    """Sink that appends lines to a local text file.

    The default target is ``log.txt`` in the current working directory, not a
    file next to the logforge package, so an installed library never writes
    into its own install location.
    """

    def __init__(self, file_path: Path | str = DEFAULT_LOG_FILE) -> None:
        """
        Initialize the sink. No I/O happens until the first delivery.

        Args:
            file_path: Target file; relative paths resolve against the
                current working directory at construction time.
        """
        self._file_path = Path(file_path).absolute()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def deliver(self, line: str) -> None:
        """
        Append ``line`` and a newline to the file.

        Raises:
            OSError: If the directory or file cannot be created or written.
        """
        if not self._file_path.parent.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug("file_sink.directory_created", path=str(self._file_path.parent))

        with open(self._file_path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file_path={str(self._file_path)!r})"
