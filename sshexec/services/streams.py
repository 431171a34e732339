"""Line-framed draining of remote output streams."""

import asyncio
import logging
from typing import Protocol

import asyncssh

from sshexec.services.errors import StreamError

logger = logging.getLogger(__name__)


class LineReader(Protocol):
    """Anything with an asyncio-style ``readline`` returning ``""`` at EOF."""

    async def readline(self) -> str: ...


def normalize_line(line: str) -> str:
    """Replace a line's terminator with a single ``\\n``.

    A pseudo-terminal turns ``\\n`` into ``\\r\\n``; a final line without
    a terminator still gets one.
    """
    if line.endswith("\r\n"):
        line = line[:-2]
    elif line.endswith(("\n", "\r")):
        line = line[:-1]
    return line + "\n"


async def drain(reader: LineReader, stream: str, host: str) -> str:
    """Read ``reader`` to end-of-stream.

    Args:
        reader: Stream to consume
        stream: Stream name for logs and errors
        host: Remote host for errors

    Returns:
        Every line read, newline-normalized, in order

    Raises:
        StreamError: If reading fails before end-of-stream
    """
    lines: list[str] = []
    try:
        while True:
            line = await reader.readline()
            if not line:
                break
            lines.append(normalize_line(line))
    except (OSError, asyncssh.Error) as e:
        raise StreamError(host, stream, e) from e

    logger.debug("Drained %d line(s) of %s from %s", len(lines), stream, host)
    return "".join(lines)


async def drain_streams(
    stdout: LineReader,
    stderr: LineReader,
    host: str,
) -> tuple[str, str]:
    """Drain stdout and stderr concurrently.

    Neither stream may wait on the other: the remote side stops writing
    to both once either one's window is full.

    Returns:
        Tuple of (stdout, stderr)

    Raises:
        StreamError: If either stream fails; the other drain is cancelled
    """
    tasks = [
        asyncio.ensure_future(drain(stdout, "stdout", host)),
        asyncio.ensure_future(drain(stderr, "stderr", host)),
    ]
    try:
        out, err = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    return out, err
