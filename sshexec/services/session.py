"""Scoped acquisition of SSH sessions and exec channels.

Both context managers release their resource exactly once on every exit
path. Release failures are logged and never replace the error that is
already propagating.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import asyncssh

from sshexec.services.errors import AuthenticationError, ConnectionError

if TYPE_CHECKING:
    from sshexec.config import Config
    from sshexec.models import SSHEndpoint

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_session(
    endpoint: "SSHEndpoint",
    config: "Config",
) -> AsyncIterator[asyncssh.SSHClientConnection]:
    """Open an authenticated SSH session using public-key auth only.

    Args:
        endpoint: Remote user, host and port
        config: Credentials, host key policy and timeouts

    Yields:
        Connected and authenticated session

    Raises:
        AuthenticationError: If the key cannot be loaded or is rejected
        ConnectionError: If the host is unreachable or its key is not trusted
    """
    try:
        client_key = config.credentials.load()
    except (OSError, asyncssh.KeyImportError, asyncssh.KeyEncryptionError) as e:
        logger.error(
            "Cannot load private key from %s: %s",
            config.credentials.description,
            e,
        )
        raise AuthenticationError(endpoint.host, e) from e

    logger.info("Opening SSH session to %s", endpoint)

    try:
        conn = await asyncssh.connect(
            endpoint.host,
            port=endpoint.port,
            username=endpoint.user,
            client_keys=[client_key],
            known_hosts=config.known_hosts_path,
            preferred_auth="publickey",
            agent_path=None,
            connect_timeout=config.connect_timeout,
        )
    except asyncssh.PermissionDenied as e:
        logger.error("Key rejected by %s: %s", endpoint, e)
        raise AuthenticationError(endpoint.host, e) from e
    except asyncssh.HostKeyNotVerifiable as e:
        logger.error(
            "Host key verification failed for %s: %s. Add the host key to %s "
            "or set SSHEXEC_HOST_KEY_POLICY=insecure",
            endpoint,
            e,
            config.known_hosts_path,
        )
        raise ConnectionError(endpoint.host, e) from e
    except (OSError, asyncssh.Error, asyncio.TimeoutError) as e:
        logger.error("Cannot connect to %s: %s", endpoint, e)
        raise ConnectionError(endpoint.host, e) from e

    try:
        yield conn
    finally:
        logger.debug("Closing SSH session to %s", endpoint)
        try:
            conn.close()
            await conn.wait_closed()
        except Exception as e:
            logger.warning("Error closing SSH session to %s: %s", endpoint, e)


@asynccontextmanager
async def open_channel(
    conn: asyncssh.SSHClientConnection,
    endpoint: "SSHEndpoint",
    command: str,
    config: "Config",
) -> AsyncIterator[asyncssh.SSHClientProcess]:
    """Start ``command`` on an exec channel with a pseudo-terminal.

    Args:
        conn: Open session the channel is multiplexed over
        endpoint: Remote endpoint, for logs and errors
        command: Shell command passed verbatim to the remote shell
        config: Terminal type and output encoding

    Yields:
        Running remote process

    Raises:
        ConnectionError: If the channel cannot be opened or the command
            cannot be started
    """
    try:
        process = await conn.create_process(
            command,
            term_type=config.term_type,
            encoding=config.encoding,
            errors="replace",
        )
    except (OSError, asyncssh.Error) as e:
        logger.error("Cannot open exec channel on %s: %s", endpoint, e)
        raise ConnectionError(endpoint.host, e) from e

    try:
        yield process
    finally:
        logger.debug("Closing exec channel on %s", endpoint)
        try:
            process.close()
            await process.wait_closed()
        except Exception as e:
            logger.warning("Error closing exec channel on %s: %s", endpoint, e)
