"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_FILE = "~/.ssh/id_rsa"


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # SSH
    port: int = field(default=22)
    identity_file: str = field(default=DEFAULT_IDENTITY_FILE)
    key_passphrase: str | None = field(default=None, repr=False)
    host_key_policy: str = field(default="verify")
    known_hosts: str | None = field(default=None)
    connect_timeout: int = field(default=30)

    # Remote process
    term_type: str = field(default="xterm")
    encoding: str = field(default="utf-8")

    # Transport
    transport: str = field(default="http")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from SSHEXEC_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            port=cls._get_int("SSHEXEC_PORT", 22),
            identity_file=os.getenv("SSHEXEC_IDENTITY_FILE", DEFAULT_IDENTITY_FILE),
            key_passphrase=os.getenv("SSHEXEC_KEY_PASSPHRASE") or None,
            host_key_policy=cls._get_choice(
                "SSHEXEC_HOST_KEY_POLICY", ("verify", "insecure"), "verify"
            ),
            known_hosts=os.getenv("SSHEXEC_KNOWN_HOSTS") or None,
            connect_timeout=cls._get_int("SSHEXEC_CONNECT_TIMEOUT", 30),
            term_type=os.getenv("SSHEXEC_TERM_TYPE", "xterm"),
            encoding=os.getenv("SSHEXEC_ENCODING", "utf-8"),
            transport=cls._get_choice("SSHEXEC_TRANSPORT", ("http", "stdio"), "http"),
            http_host=os.getenv("SSHEXEC_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("SSHEXEC_HTTP_PORT", 8000),
            log_level=os.getenv("SSHEXEC_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("SSHEXEC_LOG_COLORS", True),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_choice(key: str, choices: tuple[str, ...], default: str) -> str:
        """Get one of a fixed set of lowercase values from environment."""
        value = os.getenv(key, "").strip().lower()
        if not value:
            return default
        if value in choices:
            return value
        logger.warning(
            "Invalid value for %s: %s (expected one of %s), using default %s",
            key,
            value,
            ", ".join(choices),
            default,
        )
        return default
