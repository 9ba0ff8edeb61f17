"""A keyring: a credential store opened by name."""

from __future__ import annotations

import os
import sqlite3
from types import TracebackType

from auralib.keyring.credential import Credential
from auralib.keyring.store import Store

__all__ = ["Keyring"]


class Keyring:
    """Credentials kept in a password-protected store."""

    def __init__(self, store: Store) -> None:
        self._store = store

    @property
    def name(self) -> str:
        """The name of the keyring."""
        return self._store.name

    def get_all_credentials(self) -> list[Credential]:
        """All credentials in the keyring."""
        return self._store.get_all_credentials()

    def get_credential(self, id: int) -> Credential | None:
        """The credential with the given id, or None."""
        return self._store.get_credential(id)

    def get_credentials(self, name: str) -> list[Credential]:
        """All credentials with the given name."""
        return self._store.get_credentials(name)

    def add_credential(self, credential: Credential) -> None:
        """Add a credential."""
        self._store.add_credential(credential)

    def update_credential(self, credential: Credential) -> None:
        """Update the credential with the same id."""
        self._store.update_credential(credential)

    def delete_credential(self, id: int) -> None:
        """Remove the credential with the given id."""
        self._store.delete_credential(id)

    def destroy(self) -> None:
        """Delete the keyring and everything in it."""
        self._store.destroy()

    def close(self) -> None:
        """Close the keyring without deleting it."""
        self._store.close()

    def __enter__(self) -> Keyring:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @staticmethod
    def access(
        name: str,
        password: str = "",
        directory: str | os.PathLike[str] | None = None,
    ) -> Keyring | None:
        """Open or create the named keyring, or None if it cannot be unlocked.

        An empty password never opens a keyring.
        """
        if not password:
            return None
        try:
            return Keyring(Store(name, password, directory))
        except (ValueError, sqlite3.Error, OSError):
            return None

    @staticmethod
    def exists(name: str, directory: str | os.PathLike[str] | None = None) -> bool:
        """Whether the named keyring exists."""
        return Store.exists(name, directory)

    @staticmethod
    def destroy_named(name: str, directory: str | os.PathLike[str] | None = None) -> None:
        """Delete the named keyring, if it exists."""
        Store.destroy_named(name, directory)