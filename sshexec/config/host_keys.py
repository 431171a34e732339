"""SSH host key verification.

Resolves which known_hosts file (if any) a session is checked against.
"""

import logging
import os
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class HostKeyPolicy(str, Enum):
    """How server host keys are checked."""

    VERIFY = "verify"
    INSECURE = "insecure"


class HostKeyVerifier:
    """SSH host key verification manager.

    VERIFY checks every server against a known_hosts file and fails closed
    when the file is missing. INSECURE accepts any host key and must be
    requested explicitly.
    """

    def __init__(
        self,
        policy: HostKeyPolicy | str = HostKeyPolicy.VERIFY,
        known_hosts_path: str | None = None,
    ):
        """Initialize host key verifier.

        Args:
            policy: Host key policy, ``verify`` or ``insecure``
            known_hosts_path: Custom known_hosts file, defaults to
                ~/.ssh/known_hosts

        Raises:
            ValueError: If policy is not a known policy name
            FileNotFoundError: If verifying and the known_hosts file is missing
        """
        self.policy = HostKeyPolicy(policy)
        self._known_hosts = self._resolve_known_hosts(known_hosts_path)

    def _resolve_known_hosts(self, custom_path: str | None) -> str | None:
        """Resolve known_hosts path for the configured policy.

        Returns:
            Path to known_hosts file or None to disable verification

        Raises:
            FileNotFoundError: If verifying and the file is missing
        """
        if self.policy is HostKeyPolicy.INSECURE:
            logger.critical(
                "SSH HOST KEY VERIFICATION DISABLED (policy=insecure). "
                "Sessions are vulnerable to MITM attacks; "
                "only use on trusted networks."
            )
            return None

        if custom_path:
            path = Path(os.path.expanduser(custom_path))
        else:
            path = Path.home() / ".ssh" / "known_hosts"

        if not path.exists():
            raise FileNotFoundError(
                f"SSH host key verification required but "
                f"known_hosts file not found: {path}\n\n"
                f"To fix this:\n"
                f"1. Add host keys: ssh-keyscan <hostname> >> {path}\n"
                f"2. Or point SSHEXEC_KNOWN_HOSTS at an existing file\n"
                f"3. Or disable verification (NOT RECOMMENDED): "
                f"SSHEXEC_HOST_KEY_POLICY=insecure"
            )

        return str(path)

    def get_known_hosts_path(self) -> str | None:
        """Get path to known_hosts file.

        Returns:
            Path string or None if verification disabled
        """
        return self._known_hosts

    def is_enabled(self) -> bool:
        """Check if host key verification is enabled."""
        return self._known_hosts is not None
