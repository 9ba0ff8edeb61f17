"""A child process whose combined console output is collected."""

from __future__ import annotations

import errno
import itertools
import os
import shutil
import subprocess
import sys
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Generic, TypeVar

__all__ = ["Event", "ProcessExitedEventArgs", "Process"]

T = TypeVar("T")


class Event(Generic[T]):
    """A list of handlers called with the same event data."""

    def __init__(self) -> None:
        self._handlers: dict[int, Callable[[T], object]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def subscribe(self, handler: Callable[[T], object]) -> int:
        """Add a handler and return an id that can remove it again."""
        with self._lock:
            handler_id = next(self._ids)
            self._handlers[handler_id] = handler
            return handler_id

    def unsubscribe(self, handler_id: int) -> bool:
        """Remove a handler; False if the id is unknown."""
        with self._lock:
            return self._handlers.pop(handler_id, None) is not None

    def invoke(self, args: T) -> None:
        """Call every handler, in the order they were added."""
        with self._lock:
            handlers = list(self._handlers.values())
        for handler in handlers:
            handler(args)

    def __call__(self, args: T) -> None:
        self.invoke(args)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)


@dataclass(frozen=True)
class ProcessExitedEventArgs:
    """The result of a finished process."""

    exit_code: int
    output: str


def _resolve(path: Path) -> str:
    found = shutil.which(str(path))
    if found is None:
        raise FileNotFoundError(errno.ENOENT, "executable not found", str(path))
    return found


class Process:
    """A process that is created up front and run when started."""

    def __init__(self, path: str | os.PathLike[str], args: Iterable[str] = ()) -> None:
        self._path = Path(path)
        self._args = list(args)
        self._executable = _resolve(self._path)
        self._lock = threading.Lock()
        self._exited: Event[ProcessExitedEventArgs] = Event()
        self._running = False
        self._completed = False
        self._killed = False
        self._exit_code = -1
        self._output = ""
        self._popen: subprocess.Popen[bytes] | None = None
        self._watch_thread: threading.Thread | None = None

    @property
    def path(self) -> Path:
        """The path the process was created with."""
        return self._path

    @property
    def exited(self) -> Event[ProcessExitedEventArgs]:
        """Raised once the process has finished."""
        return self._exited

    @property
    def is_running(self) -> bool:
        """Whether the process has started and not yet finished."""
        with self._lock:
            return self._running

    @property
    def has_completed(self) -> bool:
        """Whether the process has finished or was killed."""
        with self._lock:
            return self._completed

    @property
    def exit_code(self) -> int:
        """The exit code; -1 until completed, or when killed by a signal."""
        with self._lock:
            return self._exit_code

    @property
    def output(self) -> str:
        """Everything written to stdout and stderr; empty until completed."""
        with self._lock:
            return self._output

    def start(self) -> bool:
        """Run the process; False if it has already completed."""
        with self._lock:
            if self._running:
                return True
            if self._completed:
                return False
            flags = getattr(subprocess, "CREATE_NO_WINDOW", 0) if sys.platform == "win32" else 0
            popen = subprocess.Popen(
                [self._executable, *self._args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                creationflags=flags,
            )
            self._popen = popen
            self._watch_thread = threading.Thread(
                target=self._watch, args=(popen,), daemon=True
            )
            self._running = True
            self._watch_thread.start()
            return True

    def kill(self) -> bool:
        """Terminate the running process; False if it is not running."""
        with self._lock:
            if not self._running or self._popen is None:
                return False
            try:
                self._popen.terminate()
            except OSError:
                return False
            self._killed = True
            self._exit_code = -1
            self._running = False
            self._completed = True
            return True

    def wait_for_exit(self) -> int:
        """Block until the process has finished and return its exit code."""
        with self._lock:
            thread = self._watch_thread
        if thread is None:
            raise RuntimeError("the process has not been started")
        if thread is not threading.current_thread():
            thread.join()
        return self.exit_code

    def _watch(self, popen: subprocess.Popen[bytes]) -> None:
        raw, _ = popen.communicate()
        output = (raw or b"").decode("utf-8", errors="replace")
        code = popen.returncode
        with self._lock:
            self._exit_code = -1 if self._killed or code is None or code < 0 else code
            self._output = output
            self._running = False
            self._completed = True
            args = ProcessExitedEventArgs(self._exit_code, output)
        self._exited.invoke(args)

    def __enter__(self) -> Process:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._watch_thread is not None:
            self.wait_for_exit()