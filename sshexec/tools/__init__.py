"""MCP tools for sshexec."""

from sshexec.tools.execute import execute_command

__all__ = ["execute_command"]
