"""Private key credential source."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import asyncssh

from sshexec.config.settings import DEFAULT_IDENTITY_FILE


@dataclass(frozen=True)
class CredentialSource:
    """Where the private key used for public-key authentication comes from.

    Exactly one of ``key_path`` or ``key_data`` is set. Key bytes let
    callers (and tests) inject a key without touching the filesystem.
    """

    key_path: Path | None = None
    key_data: bytes | None = field(default=None, repr=False)
    passphrase: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if (self.key_path is None) == (self.key_data is None):
            raise ValueError("CredentialSource needs exactly one of key_path or key_data")

    @classmethod
    def from_path(
        cls, path: str | Path, passphrase: str | None = None
    ) -> "CredentialSource":
        """Credential read from a key file, expanding ``~``."""
        return cls(key_path=Path(os.path.expanduser(str(path))), passphrase=passphrase)

    @classmethod
    def from_bytes(
        cls, data: bytes, passphrase: str | None = None
    ) -> "CredentialSource":
        """Credential from in-memory key material."""
        return cls(key_data=data, passphrase=passphrase)

    @classmethod
    def default(cls) -> "CredentialSource":
        """The invoking user's ``~/.ssh/id_rsa``."""
        return cls.from_path(DEFAULT_IDENTITY_FILE)

    @property
    def description(self) -> str:
        """Human readable origin of the key, safe for logs."""
        if self.key_path is not None:
            return str(self.key_path)
        return "<in-memory key>"

    def load(self) -> asyncssh.SSHKey:
        """Load and decrypt the private key.

        Returns:
            Parsed private key

        Raises:
            OSError: If the key file cannot be read
            asyncssh.KeyImportError: If the key is malformed or encrypted
                and no passphrase was given
            asyncssh.KeyEncryptionError: If the passphrase is wrong or
                the key cipher is unavailable
        """
        if self.key_data is not None:
            return asyncssh.import_private_key(self.key_data, self.passphrase)
        return asyncssh.read_private_key(str(self.key_path), self.passphrase)
