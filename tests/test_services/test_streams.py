"""Tests for concurrent stream draining."""

import asyncio

import pytest

from sshexec.services import StreamError, drain, drain_streams, normalize_line


class QueueReader:
    """Reader fed by a bounded queue, like a channel with a small window."""

    def __init__(self, maxsize: int = 4) -> None:
        self.queue: asyncio.Queue[str] = asyncio.Queue(maxsize)

    async def readline(self) -> str:
        return await self.queue.get()


class FailingReader:
    async def readline(self) -> str:
        raise OSError("connection reset")


async def produce(out: QueueReader, err: QueueReader, count: int, line: str) -> None:
    """Interleave writes to both streams, blocking when either is full."""
    for i in range(count):
        await out.queue.put(f"{i} {line}\r\n")
        await err.queue.put(f"{i} {line}\r\n")
    await out.queue.put("")
    await err.queue.put("")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("hello\r\n", "hello\n"),
        ("hello\n", "hello\n"),
        ("hello\r", "hello\n"),
        ("hello", "hello\n"),
        ("\r\n", "\n"),
        ("a\rb\n", "a\rb\n"),
    ],
)
def test_normalize_line(line: str, expected: str) -> None:
    assert normalize_line(line) == expected


@pytest.mark.asyncio
async def test_drain_flushes_trailing_partial_line() -> None:
    reader = QueueReader(maxsize=0)
    for chunk in ["one\n", "two\r\n", "three", ""]:
        reader.queue.put_nowait(chunk)

    assert await drain(reader, "stdout", "web1") == "one\ntwo\nthree\n"


@pytest.mark.asyncio
async def test_drain_empty_stream() -> None:
    reader = QueueReader(maxsize=0)
    reader.queue.put_nowait("")

    assert await drain(reader, "stderr", "web1") == ""


@pytest.mark.asyncio
async def test_drain_wraps_read_errors() -> None:
    with pytest.raises(StreamError) as exc_info:
        await drain(FailingReader(), "stdout", "web1")

    assert exc_info.value.stream == "stdout"
    assert exc_info.value.host == "web1"
    assert "connection reset" in str(exc_info.value)


@pytest.mark.asyncio
async def test_sequential_drain_would_deadlock() -> None:
    """Reading only stdout stalls once the producer blocks on stderr."""
    out, err = QueueReader(), QueueReader()
    producer = asyncio.create_task(produce(out, err, 100, "x"))

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(drain(out, "stdout", "web1"), timeout=0.5)

    producer.cancel()
    with pytest.raises(asyncio.CancelledError):
        await producer


@pytest.mark.asyncio
async def test_concurrent_drain_large_output_on_both_streams() -> None:
    """About 10 MB on each stream completes without deadlock, in order."""
    out, err = QueueReader(), QueueReader()
    count = 10_000
    line = "x" * 1000
    producer = asyncio.create_task(produce(out, err, count, line))

    stdout, stderr = await asyncio.wait_for(
        drain_streams(out, err, "web1"), timeout=60
    )
    await producer

    expected = [f"{i} {line}" for i in range(count)]
    assert stdout.splitlines() == expected
    assert stderr.splitlines() == expected
    assert len(stdout) > 10_000_000


@pytest.mark.asyncio
async def test_failure_on_one_stream_cancels_the_other() -> None:
    idle = QueueReader()

    with pytest.raises(StreamError) as exc_info:
        await asyncio.wait_for(
            drain_streams(idle, FailingReader(), "web1"), timeout=5
        )

    assert exc_info.value.stream == "stderr"
