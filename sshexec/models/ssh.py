"""SSH-related data models."""

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SSHEndpoint:
    """Remote endpoint of a single invocation."""

    user: str
    host: str
    port: int = 22

    def __str__(self) -> str:
        return f"{self.user}@{self.host}:{self.port}"


class ExecutionState(str, Enum):
    """Lifecycle of one remote command invocation.

    States advance strictly forward. CLEANED is the success terminal,
    FAILED is reached from any state when a step aborts.
    """

    IDLE = "idle"
    CONNECTING = "connecting"
    AUTHENTICATED = "authenticated"
    CHANNEL_OPEN = "channel_open"
    EXECUTING = "executing"
    DRAINING = "draining"
    CLOSED = "closed"
    CLEANED = "cleaned"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is possible."""
        return self in (ExecutionState.CLEANED, ExecutionState.FAILED)


_ORDER = list(ExecutionState)


@dataclass
class Invocation:
    """State of one connect-execute-disconnect cycle."""

    endpoint: SSHEndpoint
    state: ExecutionState = ExecutionState.IDLE
    history: list[ExecutionState] = field(
        default_factory=lambda: [ExecutionState.IDLE]
    )

    def advance(self, state: ExecutionState) -> None:
        """Move forward to ``state``.

        Raises:
            RuntimeError: If ``state`` is not after the current state,
                or the invocation already finished
        """
        if self.state.is_terminal or _ORDER.index(state) <= _ORDER.index(self.state):
            raise RuntimeError(
                f"Invalid transition {self.state.value} -> {state.value} "
                f"for {self.endpoint}"
            )
        logger.debug("%s: %s -> %s", self.endpoint, self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def fail(self) -> None:
        """Mark the invocation failed from whatever state it reached."""
        if not self.state.is_terminal:
            logger.debug("%s: %s -> failed", self.endpoint, self.state.value)
            self.state = ExecutionState.FAILED
            self.history.append(ExecutionState.FAILED)
