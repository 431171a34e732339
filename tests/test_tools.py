"""Tests for the ssh_execute MCP tool."""

from collections.abc import Generator
from unittest.mock import patch

import pytest

from sshexec.models import ExecutionResult
from sshexec.services import ConnectionError, reset_state, set_executor
from sshexec.tools import execute_command


class FakeExecutor:
    def __init__(
        self,
        result: ExecutionResult | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    async def execute(
        self, user: str, host: str, command: str, port: int | None = None
    ) -> ExecutionResult:
        self.calls.append((user, host, command))
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


@pytest.fixture(autouse=True)
def fresh_state() -> Generator[None, None, None]:
    reset_state()
    yield
    reset_state()


@pytest.mark.asyncio
async def test_returns_output() -> None:
    fake = FakeExecutor(ExecutionResult(status=0, stdout="hello\n", stderr=""))
    set_executor(fake)

    assert await execute_command("deploy", "web1", "echo hello") == "hello\n"
    assert fake.calls == [("deploy", "web1", "echo hello")]


@pytest.mark.asyncio
async def test_reports_exit_code() -> None:
    set_executor(FakeExecutor(ExecutionResult(status=7, stdout="", stderr="")))

    assert await execute_command("deploy", "web1", "exit 7") == "[exit code: 7]"


@pytest.mark.asyncio
async def test_execution_error_becomes_message() -> None:
    error = ConnectionError("web1", OSError("No route to host"))
    set_executor(FakeExecutor(error=error))

    output = await execute_command("deploy", "web1", "uptime")

    assert output == "Error: Cannot connect to web1: No route to host"


@pytest.mark.asyncio
async def test_missing_known_hosts_becomes_message() -> None:
    with patch(
        "sshexec.tools.execute.get_executor",
        side_effect=FileNotFoundError("known_hosts file not found: /x"),
    ):
        output = await execute_command("deploy", "web1", "uptime")

    assert output == "Error: known_hosts file not found: /x"
