"""Application configuration.

Delegates to specialized components:
- Settings: Environment variables
- CredentialSource: Private key for authentication
- HostKeyVerifier: Host key policy and known_hosts
"""

import logging
from dataclasses import dataclass, field

from sshexec.config.credentials import CredentialSource
from sshexec.config.host_keys import HostKeyPolicy, HostKeyVerifier
from sshexec.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration.

    Aggregates settings, credentials and host key verification.
    Every component can be replaced for tests.
    """

    settings: Settings = field(default_factory=Settings)
    credentials: CredentialSource = field(default_factory=CredentialSource.default)
    host_keys: HostKeyVerifier = field(
        default_factory=lambda: HostKeyVerifier(policy=HostKeyPolicy.VERIFY)
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        settings = Settings.from_env()

        credentials = CredentialSource.from_path(
            settings.identity_file,
            passphrase=settings.key_passphrase,
        )

        host_keys = HostKeyVerifier(
            policy=settings.host_key_policy,
            known_hosts_path=settings.known_hosts,
        )

        logger.debug(
            "Config loaded (identity=%s, host_key_policy=%s, port=%d)",
            credentials.description,
            host_keys.policy.value,
            settings.port,
        )

        return cls(
            settings=settings,
            credentials=credentials,
            host_keys=host_keys,
        )

    # Delegate to settings for convenience
    @property
    def port(self) -> int:
        """Default SSH port."""
        return self.settings.port

    @property
    def connect_timeout(self) -> int:
        """Session establishment timeout in seconds."""
        return self.settings.connect_timeout

    @property
    def term_type(self) -> str:
        """Terminal type requested for the pseudo-terminal."""
        return self.settings.term_type

    @property
    def encoding(self) -> str:
        """Encoding used to decode remote output."""
        return self.settings.encoding

    @property
    def transport(self) -> str:
        """Transport type (http or stdio)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        """HTTP server bind address."""
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        """HTTP server port."""
        return self.settings.http_port

    @property
    def known_hosts_path(self) -> str | None:
        """Path to known_hosts file or None if disabled."""
        return self.host_keys.get_known_hosts_path()
