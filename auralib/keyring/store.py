"""A password-protected SQLite file holding credentials."""

from __future__ import annotations

import hashlib
import hmac
import os
import sqlite3
from pathlib import Path
from types import TracebackType

import platformdirs

from auralib.keyring.credential import Credential

__all__ = ["Store"]

_CREATE_CREDENTIALS = (
    "CREATE TABLE IF NOT EXISTS credentials "
    "(id TEXT PRIMARY KEY, name TEXT, uri TEXT, username TEXT, password TEXT)"
)
_CREATE_META = (
    "CREATE TABLE IF NOT EXISTS keyring_meta (salt BLOB NOT NULL, verifier BLOB NOT NULL)"
)
_KDF_ITERATIONS = 100_000
_SALT_SIZE = 16


def _default_directory() -> Path:
    return platformdirs.user_config_path("auralib", appauthor=False) / "Keyring"


def _path_for(name: str, directory: str | os.PathLike[str] | None) -> Path:
    folder = Path(directory) if directory is not None else _default_directory()
    folder.mkdir(parents=True, exist_ok=True)
    return folder / f"{name}.ring"


def _derive(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _KDF_ITERATIONS)


def _to_credential(row: tuple) -> Credential:
    cred_id, name, uri, username, password = row
    return Credential(name or "", uri or "", username or "", password or "", id=int(cred_id))


class Store:
    """A named credential store kept in one file, unlocked by a password."""

    def __init__(
        self,
        name: str,
        password: str,
        directory: str | os.PathLike[str] | None = None,
    ) -> None:
        self._name = name
        self._path = _path_for(name, directory)
        connection = sqlite3.connect(self._path)
        try:
            self._unlock(connection, password)
            with connection:
                connection.execute(_CREATE_CREDENTIALS)
        except BaseException:
            connection.close()
            raise
        self._connection: sqlite3.Connection | None = connection

    @staticmethod
    def _unlock(connection: sqlite3.Connection, password: str) -> None:
        with connection:
            connection.execute(_CREATE_META)
            row = connection.execute("SELECT salt, verifier FROM keyring_meta").fetchone()
            if row is None:
                salt = os.urandom(_SALT_SIZE)
                connection.execute(
                    "INSERT INTO keyring_meta (salt, verifier) VALUES (?, ?)",
                    (salt, _derive(password, salt)),
                )
                return
        salt, verifier = row
        if not hmac.compare_digest(_derive(password, bytes(salt)), bytes(verifier)):
            raise ValueError("unable to unlock the store: wrong password")

    @property
    def name(self) -> str:
        """The name of the store."""
        return self._name

    @property
    def path(self) -> Path:
        """The file the store is kept in."""
        return self._path

    @property
    def _db(self) -> sqlite3.Connection:
        if self._connection is None:
            raise RuntimeError(f"store {self._name!r} is closed")
        return self._connection

    def get_all_credentials(self) -> list[Credential]:
        """All credentials, in the order they were added."""
        rows = self._db.execute("SELECT * FROM credentials ORDER BY rowid")
        return [_to_credential(row) for row in rows]

    def get_credential(self, id: int) -> Credential | None:
        """The credential with the given id, or None."""
        row = self._db.execute(
            "SELECT * FROM credentials WHERE id = ?", (str(id),)
        ).fetchone()
        return _to_credential(row) if row is not None else None

    def get_credentials(self, name: str) -> list[Credential]:
        """All credentials with the given name."""
        rows = self._db.execute(
            "SELECT * FROM credentials WHERE name = ? ORDER BY rowid", (name,)
        )
        return [_to_credential(row) for row in rows]

    def add_credential(self, credential: Credential) -> None:
        """Add a credential; raises sqlite3.IntegrityError if its id is taken."""
        with self._db as db:
            db.execute(
                "INSERT INTO credentials (id, name, uri, username, password) "
                "VALUES (?,?,?,?,?)",
                (
                    str(credential.id),
                    credential.name,
                    credential.uri,
                    credential.username,
                    credential.password,
                ),
            )

    def update_credential(self, credential: Credential) -> None:
        """Overwrite the stored fields of the credential with the same id."""
        with self._db as db:
            db.execute(
                "UPDATE credentials SET name = ?, uri = ?, username = ?, password = ? "
                "WHERE id = ?",
                (
                    credential.name,
                    credential.uri,
                    credential.username,
                    credential.password,
                    str(credential.id),
                ),
            )

    def delete_credential(self, id: int) -> None:
        """Remove the credential with the given id."""
        with self._db as db:
            db.execute("DELETE FROM credentials WHERE id = ?", (str(id),))

    def close(self) -> None:
        """Close the underlying database."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def destroy(self) -> None:
        """Close the store and delete its file."""
        self.close()
        self._path.unlink(missing_ok=True)

    def __enter__(self) -> Store:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @staticmethod
    def exists(name: str, directory: str | os.PathLike[str] | None = None) -> bool:
        """Whether a store with the given name has a file."""
        return _path_for(name, directory).exists()

    @staticmethod
    def destroy_named(name: str, directory: str | os.PathLike[str] | None = None) -> None:
        """Delete the file of the named store, if there is one."""
        _path_for(name, directory).unlink(missing_ok=True)