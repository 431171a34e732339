"""Data models for sshexec."""

from sshexec.models.result import ExecutionResult
from sshexec.models.ssh import ExecutionState, Invocation, SSHEndpoint

__all__ = [
    "ExecutionResult",
    "ExecutionState",
    "Invocation",
    "SSHEndpoint",
]
