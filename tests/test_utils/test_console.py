"""Tests for the console log formatter."""

import logging

from sshexec.utils.console import ColorfulFormatter


def make_record(name: str, level: int, msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_plain_format_layout() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    record = make_record(
        "sshexec.services.executor", logging.INFO, "Completed on %s", "deploy@web1:22"
    )

    line = formatter.format(record)
    parts = [p.strip() for p in line.split("|")]

    assert parts[1] == "INFO"
    assert parts[2] == "services.executor"
    assert parts[3] == "Completed on deploy@web1:22"
    assert "\033[" not in line


def test_colors_highlight_endpoint_and_duration() -> None:
    formatter = ColorfulFormatter(use_colors=True)
    record = make_record(
        "sshexec.services.session", logging.WARNING, "deploy@web1:22 took 12.5ms"
    )

    line = formatter.format(record)

    assert "\033[95mdeploy@web1:22\033[0m" in line
    assert "\033[93m12.5ms\033[0m" in line
