"""Logic behind a dialog for managing a keyring."""

from __future__ import annotations

import os
from enum import IntFlag
from urllib.parse import urlparse

from auralib.keyring.credential import Credential
from auralib.keyring.keyring import Keyring

__all__ = ["CredentialCheckStatus", "KeyringDialogController", "is_valid_url"]


class CredentialCheckStatus(IntFlag):
    """Result of checking a credential; problems may be combined."""

    VALID = 1
    EMPTY_NAME = 2
    EMPTY_USERNAME_PASSWORD = 4
    INVALID_URI = 8


def is_valid_url(url: str) -> bool:
    """Whether url has a scheme and a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


class KeyringDialogController:
    """Enables, disables and edits a named keyring."""

    def __init__(
        self,
        name: str,
        keyring: Keyring | None = None,
        directory: str | os.PathLike[str] | None = None,
    ) -> None:
        self._name = name
        self._keyring = keyring
        self._directory = directory

    @property
    def keyring(self) -> Keyring | None:
        """The open keyring, or None when disabled."""
        return self._keyring

    def is_enabled(self) -> bool:
        """Whether a keyring is open."""
        return self._keyring is not None

    def is_valid(self) -> bool:
        """False when a keyring exists on disk but could not be opened."""
        return not (self._keyring is None and Keyring.exists(self._name, self._directory))

    def enable_keyring(self, password: str = "") -> bool:
        """Open the keyring with password; False if already enabled or it fails."""
        if self._keyring is not None:
            return False
        self._keyring = Keyring.access(self._name, password, self._directory)
        return self._keyring is not None

    def disable_keyring(self) -> bool:
        """Destroy the open keyring; False if none is open."""
        if self._keyring is None:
            return False
        keyring, self._keyring = self._keyring, None
        keyring.destroy()
        return True

    def reset_keyring(self) -> bool:
        """Delete a keyring that could not be opened; False if one is open."""
        if self._keyring is not None:
            return False
        Keyring.destroy_named(self._name, self._directory)
        return True

    def validate_credential(self, credential: Credential) -> CredentialCheckStatus:
        """Check a credential for missing or malformed fields."""
        result = CredentialCheckStatus(0)
        if not credential.name:
            result |= CredentialCheckStatus.EMPTY_NAME
        if not credential.username and not credential.password:
            result |= CredentialCheckStatus.EMPTY_USERNAME_PASSWORD
        if credential.uri and not is_valid_url(credential.uri):
            result |= CredentialCheckStatus.INVALID_URI
        return result if result else CredentialCheckStatus.VALID

    def _accepts(self, credential: Credential) -> bool:
        return CredentialCheckStatus.VALID in self.validate_credential(credential)

    def get_all_credentials(self) -> list[Credential]:
        """All credentials, or an empty list when disabled."""
        if self._keyring is None:
            return []
        return self._keyring.get_all_credentials()

    def add_credential(self, credential: Credential) -> bool:
        """Add a valid credential; False if disabled or invalid."""
        if self._keyring is None or not self._accepts(credential):
            return False
        self._keyring.add_credential(credential)
        return True

    def update_credential(self, credential: Credential) -> bool:
        """Update an existing valid credential; False otherwise."""
        if self._keyring is None or not self._accepts(credential):
            return False
        if self._keyring.get_credential(credential.id) is None:
            return False
        self._keyring.update_credential(credential)
        return True

    def delete_credential(self, id: int) -> bool:
        """Delete a credential; False if disabled."""
        if self._keyring is None:
            return False
        self._keyring.delete_credential(id)
        return True