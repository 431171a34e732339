"""Protocol interfaces for dependency inversion.

The MCP tool depends on ``CommandExecutor`` rather than on
``RemoteExecutor`` directly, so tests can swap in a fake executor:

    class FakeExecutor:
        async def execute(self, user, host, command, port=None):
            return ExecutionResult(status=0, stdout="ok\\n", stderr="")

    set_executor(FakeExecutor())
"""

from typing import Protocol, runtime_checkable

from sshexec.models import ExecutionResult


@runtime_checkable
class CommandExecutor(Protocol):
    """Protocol for running a single remote command."""

    async def execute(
        self,
        user: str,
        host: str,
        command: str,
        port: int | None = None,
    ) -> ExecutionResult:
        """Run command on host as user.

        Returns:
            ExecutionResult with status, stdout and stderr

        Raises:
            ExecutionError: If the command could not be run
        """
        ...
