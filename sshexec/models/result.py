"""Command execution result model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionResult:
    """Result of a remote command execution.

    Attributes:
        status: Remote exit status, 0 when the channel reported none
        stdout: Captured standard output, one ``\\n`` per line
        stderr: Captured standard error, one ``\\n`` per line
    """

    status: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        """Whether the remote command exited with status 0."""
        return self.status == 0

    def combined(self) -> str:
        """Render stdout, stderr and a non-zero status as one text block."""
        parts = []
        if self.stdout:
            parts.append(self.stdout)
        if self.stderr:
            parts.append(f"[stderr]\n{self.stderr}")
        if self.status != 0:
            parts.append(f"[exit code: {self.status}]")

        return "\n".join(parts) if parts else "(no output)"
