"""Access to environment variables and the system shell."""

from __future__ import annotations

import os
import shlex
import sys

from auralib.system.process import Process

__all__ = ["get_variable", "set_variable", "clear_variable", "exec_command"]


def get_variable(key: str) -> str:
    """The value of an environment variable, or an empty string."""
    return os.environ.get(key, "")


def set_variable(key: str, value: str) -> None:
    """Set an environment variable; raises ValueError for an invalid name."""
    os.environ[key] = value


def clear_variable(key: str) -> None:
    """Set an environment variable to the empty string."""
    set_variable(key, "")


def exec_command(command: str) -> str:
    """Run a command line and return what it printed."""
    if not command:
        return ""
    args = shlex.split(command)
    if not args:
        return ""
    if sys.platform == "win32":
        process = Process("cmd.exe", ["/C", " ".join(args)])
    else:
        process = Process(args[0], args[1:])
    if not process.start():
        return ""
    process.wait_for_exit()
    return process.output