"""A thread-safe logger writing to the terminal and optionally to a file."""

from __future__ import annotations

import inspect
import os
import sys
import threading
from enum import IntEnum
from pathlib import Path
from types import FrameType, TracebackType

__all__ = ["LogLevel", "Logger"]


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


def _location(frame: FrameType | None) -> tuple[str, int, int, str]:
    if frame is None:
        return "", 0, 0, ""
    info = inspect.getframeinfo(frame, context=0)
    positions = getattr(info, "positions", None)
    column = 0
    if positions is not None and positions.col_offset is not None:
        column = positions.col_offset + 1
    return info.filename, info.lineno, column, info.function


class Logger:
    """Writes formatted log messages at or above a minimum level."""

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        minimum: LogLevel = LogLevel.DEBUG,
    ) -> None:
        self._minimum = minimum
        self._path = Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._stream = (
            self._path.open("a", encoding="utf-8") if self._path is not None else None
        )

    @property
    def path(self) -> Path | None:
        """The log file, or None when logging only to the terminal."""
        return self._path

    def log(self, level: LogLevel, message: str) -> None:
        """Log a message, tagged with the caller's location."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        filename, line, column, function = _location(caller)
        del frame, caller
        with self._lock:
            if level < self._minimum:
                return
            entry = (
                f"[{LogLevel(level).name}] file: {filename}({line}:{column}) "
                f"`{function}`: {message}\n"
            )
            if self._stream is not None:
                self._stream.write(entry + "\n")
                self._stream.flush()
            target = sys.stdout if level <= LogLevel.INFO else sys.stderr
            print(entry, file=target)

    def close(self) -> None:
        """Close the log file, if any."""
        with self._lock:
            if self._stream is not None:
                self._stream.close()
                self._stream = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()