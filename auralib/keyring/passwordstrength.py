"""Rating of how strong a password is."""

from __future__ import annotations

import string
from enum import IntEnum

__all__ = ["PasswordStrength", "get_password_strength"]


class PasswordStrength(IntEnum):
    """Strength levels of a password, from weakest to strongest."""

    BLANK = 0
    VERY_WEAK = 1
    WEAK = 2
    MEDIUM = 3
    STRONG = 4
    VERY_STRONG = 5


_DIGITS = frozenset(string.digits.encode("ascii"))
_LOWER = frozenset(string.ascii_lowercase.encode("ascii"))
_UPPER = frozenset(string.ascii_uppercase.encode("ascii"))


def _character_class(byte: int) -> str:
    if byte in _DIGITS:
        return "digit"
    if byte in _LOWER:
        return "lower"
    if byte in _UPPER:
        return "upper"
    return "symbol"


def get_password_strength(password: str) -> PasswordStrength:
    """Rate a password by its length and the kinds of characters it uses."""
    data = password.encode("utf-8")
    if not data:
        return PasswordStrength.BLANK
    if len(data) <= 6:
        return PasswordStrength.VERY_WEAK
    classes = {_character_class(byte) for byte in data}
    strength = len(classes) + (1 if len(data) >= 12 else 0)
    return PasswordStrength(strength)