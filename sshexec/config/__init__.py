"""Configuration module for sshexec.

Provides focused classes for different configuration concerns:
- Config: Main configuration class (aggregates all components)
- CredentialSource: Private key used for authentication
- HostKeyVerifier: Host key policy and known_hosts resolution
- Settings: Environment variable configuration
"""

from sshexec.config.credentials import CredentialSource
from sshexec.config.host_keys import HostKeyPolicy, HostKeyVerifier
from sshexec.config.main import Config
from sshexec.config.settings import Settings

__all__ = [
    "Config",
    "CredentialSource",
    "HostKeyPolicy",
    "HostKeyVerifier",
    "Settings",
]
