"""Utility modules for sshexec."""

from sshexec.utils.console import ColorfulFormatter

__all__ = ["ColorfulFormatter"]
