"""Run a single shell command on a remote host over SSH."""

from sshexec.models import ExecutionResult
from sshexec.services import (
    AuthenticationError,
    ConnectionError,
    ExecutionError,
    RemoteExecutor,
    StreamError,
    UnexpectedFailure,
    ssh_execute,
)

__all__ = [
    "AuthenticationError",
    "ConnectionError",
    "ExecutionError",
    "ExecutionResult",
    "RemoteExecutor",
    "StreamError",
    "UnexpectedFailure",
    "ssh_execute",
]
