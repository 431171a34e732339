"""Global state management for sshexec."""

from sshexec.config import Config
from sshexec.protocols import CommandExecutor
from sshexec.services.executor import RemoteExecutor

# Global state (initialized on first access)
_config: Config | None = None
_executor: CommandExecutor | None = None


def get_config() -> Config:
    """Get or create config."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def get_executor() -> CommandExecutor:
    """Get or create the remote executor."""
    global _executor
    if _executor is None:
        _executor = RemoteExecutor(get_config())
    return _executor


def reset_state() -> None:
    """Reset global state for testing.

    Clears the singleton instances so tests start with fresh state.
    """
    global _config, _executor
    _config = None
    _executor = None


def set_config(config: Config) -> None:
    """Set the global config instance.

    Args:
        config: Config instance to use globally.
    """
    global _config
    _config = config


def set_executor(executor: CommandExecutor) -> None:
    """Set the global executor instance.

    Args:
        executor: Any CommandExecutor, e.g. a fake in tests.
    """
    global _executor
    _executor = executor
