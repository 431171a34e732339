"""Remote command execution over a single SSH session."""

import asyncio
import logging
import time

from sshexec.config import Config
from sshexec.models import ExecutionResult, ExecutionState, Invocation, SSHEndpoint
from sshexec.services.errors import ExecutionError, UnexpectedFailure
from sshexec.services.session import open_channel, open_session
from sshexec.services.streams import drain_streams

logger = logging.getLogger(__name__)


class RemoteExecutor:
    """Runs one shell command per call on a remote host.

    Every call opens its own session and channel and closes both before
    returning, so one executor can serve concurrent calls.
    """

    def __init__(self, config: Config | None = None) -> None:
        """Initialize executor.

        Args:
            config: Credentials, host key policy and SSH options.
                Loaded from the environment when omitted.
        """
        self.config = config if config is not None else Config.from_env()

    async def execute(
        self,
        user: str,
        host: str,
        command: str,
        port: int | None = None,
    ) -> ExecutionResult:
        """Run ``command`` on ``host`` as ``user`` inside a pseudo-terminal.

        The command string goes to the remote shell unmodified. A non-zero
        exit status is returned in the result, not raised.

        Args:
            user: Remote login name
            host: Remote host name or address
            command: Shell command to run
            port: SSH port, defaults to the configured port

        Returns:
            Exit status with the complete stdout and stderr

        Raises:
            AuthenticationError: If the key is missing, malformed or rejected
            ConnectionError: If the session or channel cannot be established
            StreamError: If reading remote output fails
            UnexpectedFailure: For any other error
        """
        endpoint = SSHEndpoint(user=user, host=host, port=port or self.config.port)
        invocation = Invocation(endpoint)
        started = time.perf_counter()

        try:
            result = await self._run(invocation, command)
        except ExecutionError:
            invocation.fail()
            raise
        except Exception as e:
            invocation.fail()
            logger.exception("Unexpected failure executing on %s", endpoint)
            raise UnexpectedFailure(host, e) from e

        invocation.advance(ExecutionState.CLEANED)
        logger.info(
            "Completed command on %s (status=%d) in %.1fms",
            endpoint,
            result.status,
            (time.perf_counter() - started) * 1000,
        )
        return result

    async def _run(self, invocation: Invocation, command: str) -> ExecutionResult:
        endpoint = invocation.endpoint

        invocation.advance(ExecutionState.CONNECTING)
        async with open_session(endpoint, self.config) as conn:
            invocation.advance(ExecutionState.AUTHENTICATED)

            async with open_channel(conn, endpoint, command, self.config) as process:
                invocation.advance(ExecutionState.CHANNEL_OPEN)
                logger.debug("Started %r on %s", command, endpoint)
                invocation.advance(ExecutionState.EXECUTING)

                invocation.advance(ExecutionState.DRAINING)
                stdout, stderr = await drain_streams(
                    process.stdout, process.stderr, endpoint.host
                )

                await process.wait_closed()
                invocation.advance(ExecutionState.CLOSED)

                status = process.exit_status
                if process.exit_signal is not None:
                    # A signal death reports -1, not a real exit status
                    logger.warning(
                        "%r on %s terminated by signal %s, assuming status 0",
                        command,
                        endpoint,
                        process.exit_signal[0],
                    )
                    status = 0
                elif status is None:
                    logger.warning(
                        "No exit status reported by %s for %r, assuming 0",
                        endpoint,
                        command,
                    )
                    status = 0

        return ExecutionResult(status=status, stdout=stdout, stderr=stderr)


def ssh_execute(
    user: str,
    host: str,
    command: str,
    config: Config | None = None,
) -> ExecutionResult:
    """Blocking wrapper running one :meth:`RemoteExecutor.execute` call.

    Must not be called from a running event loop.
    """
    return asyncio.run(RemoteExecutor(config).execute(user, host, command))
