"""A single stored credential."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from auralib.keyring.passwordstrength import get_password_strength

__all__ = ["Credential"]


def _new_id() -> int:
    return int.from_bytes(uuid.uuid4().bytes[:4], "big", signed=True)


@dataclass(order=True)
class Credential:
    """A named credential; equality and ordering use the id only."""

    name: str = field(compare=False)
    uri: str = field(compare=False)
    username: str = field(compare=False)
    password: str = field(compare=False, repr=False)
    id: int = field(default_factory=_new_id)

    def __str__(self) -> str:
        lines = [
            f"[CRED: {self.name}] ",
            f"Uri: {self.uri}",
            f"Username: {self.username}",
            f"Password: {self.password}",
            f"Strength: {int(get_password_strength(self.password))}",
        ]
        return "\n".join(lines) + "\n"