"""Services for sshexec."""

from sshexec.services.errors import (
    AuthenticationError,
    ConnectionError,
    ExecutionError,
    StreamError,
    UnexpectedFailure,
)
from sshexec.services.executor import RemoteExecutor, ssh_execute
from sshexec.services.session import open_channel, open_session
from sshexec.services.state import (
    get_config,
    get_executor,
    reset_state,
    set_config,
    set_executor,
)
from sshexec.services.streams import drain, drain_streams, normalize_line

__all__ = [
    "AuthenticationError",
    "ConnectionError",
    "ExecutionError",
    "RemoteExecutor",
    "StreamError",
    "UnexpectedFailure",
    "drain",
    "drain_streams",
    "get_config",
    "get_executor",
    "normalize_line",
    "open_channel",
    "open_session",
    "reset_state",
    "set_config",
    "set_executor",
    "ssh_execute",
]
