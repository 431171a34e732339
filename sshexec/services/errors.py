"""Errors raised by a remote command invocation.

Every error carries the remote host and the underlying exception, so
callers can report the failure without unpacking exception chains.
"""


class ExecutionError(Exception):
    """Base class for failures of a remote command invocation."""

    def __init__(self, host: str, original_error: Exception, message: str):
        """Initialize execution error.

        Args:
            host: Remote host the invocation targeted
            original_error: Exception that caused the failure
            message: Human readable summary
        """
        self.host = host
        self.original_error = original_error
        super().__init__(message)


class AuthenticationError(ExecutionError):
    """Private key missing, malformed, or rejected by the server."""

    def __init__(self, host: str, original_error: Exception):
        super().__init__(
            host, original_error, f"Authentication to {host} failed: {original_error}"
        )


class ConnectionError(ExecutionError):
    """Session or channel could not be established."""

    def __init__(self, host: str, original_error: Exception):
        super().__init__(
            host, original_error, f"Cannot connect to {host}: {original_error}"
        )


class StreamError(ExecutionError):
    """Reading stdout or stderr of the remote process failed."""

    def __init__(self, host: str, stream: str, original_error: Exception):
        self.stream = stream
        super().__init__(
            host,
            original_error,
            f"Failed reading {stream} from {host}: {original_error}",
        )


class UnexpectedFailure(ExecutionError):
    """Any other fault raised while executing a remote command."""

    def __init__(self, host: str, original_error: Exception):
        super().__init__(
            host,
            original_error,
            f"Unexpected failure executing on {host}: "
            f"{type(original_error).__name__}: {original_error}",
        )
