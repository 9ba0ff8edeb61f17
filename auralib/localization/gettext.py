"""Message translation through a single gettext domain."""

from __future__ import annotations

import gettext as _gettext
import locale
import os
import sys
import threading
from pathlib import Path

__all__ = ["init", "get_domain_name", "pgettext", "pngettext"]

_lock = threading.Lock()
_initialized = False
_domain_name = ""


def _executable_directory() -> Path:
    script = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(script).resolve().parent


def init(domain_name: str, localedir: str | os.PathLike[str] | None = None) -> bool:
    """Bind the translation domain; only the first call has any effect.

    Catalogs are looked up in localedir, by default the directory of the
    running program. Later calls do nothing and return True.
    """
    global _initialized, _domain_name
    with _lock:
        if _initialized:
            return True
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            pass
        _domain_name = domain_name
        directory = Path(localedir) if localedir is not None else _executable_directory()
        bound = _gettext.bindtextdomain(domain_name, str(directory))
        selected = _gettext.textdomain(domain_name)
        _initialized = True
        return bound is not None and selected == domain_name


def get_domain_name() -> str:
    """The bound domain name, or an empty string before init()."""
    return _domain_name


def pgettext(context: str, msg: str) -> str:
    """Translate msg within context, falling back to msg."""
    return _gettext.dpgettext(_domain_name, context, msg)


def pngettext(context: str, msg: str, msg_plural: str, n: int) -> str:
    """Translate a message with a plural form within context.

    Without a translation, msg is returned when n is 1, else msg_plural.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    return _gettext.dnpgettext(_domain_name, context, msg, msg_plural, n)