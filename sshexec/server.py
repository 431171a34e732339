"""sshexec FastMCP server.

Thin wrapper exposing RemoteExecutor as a single MCP tool.
"""

import logging
import sys

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from sshexec.config import Settings
from sshexec.tools import execute_command
from sshexec.utils.console import ColorfulFormatter


def _configure_logging() -> None:
    """Configure colorful logging for the sshexec package.

    Called at module load time so logging is configured however the
    server is started.
    """
    settings = Settings.from_env()
    log_level = settings.log_level
    use_colors = settings.log_colors

    # Disable colors if not a TTY
    if not sys.stderr.isatty():
        use_colors = False

    pkg_logger = logging.getLogger("sshexec")
    pkg_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Only add handler if not already configured
    if not pkg_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        pkg_logger.addHandler(handler)
        pkg_logger.propagate = False

    for noisy_logger in [
        "asyncssh",
        "fastmcp",
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "starlette",
        "httpx",
        "httpcore",
    ]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


_configure_logging()

logger = logging.getLogger(__name__)


def create_server() -> FastMCP:
    """Create the MCP server with the ssh_execute tool and health route.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("sshexec")

    server.tool(name="ssh_execute")(execute_command)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
