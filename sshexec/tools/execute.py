"""Remote command tool."""

import logging

from sshexec.services import ExecutionError, get_executor

logger = logging.getLogger(__name__)


async def execute_command(user: str, host: str, command: str) -> str:
    """Run a shell command on a remote host over SSH.

    The command runs in a pseudo-terminal using the server's configured
    private key. Output lines end with a single newline.

    Args:
        user: Remote login name
        host: Remote host name or address
        command: Shell command, passed verbatim to the remote shell

    Returns:
        Command output, stderr and non-zero exit code, or an error message
    """
    try:
        executor = get_executor()
        result = await executor.execute(user, host, command)
    except (ExecutionError, FileNotFoundError) as e:
        logger.error("tool:ssh_execute failed for %s@%s: %s", user, host, e)
        return f"Error: {e}"

    return result.combined()
