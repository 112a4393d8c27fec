"""Stream-backed console implementation."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from engine.api.console import ConsoleClosedError
from engine.runtime.errors import RECOVERABLE_OUTPUT_ERRORS, log_recoverable

logger = logging.getLogger(__name__)


class StdioConsole:
    """Console over text streams, defaulting to process stdin/stdout."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def read_line(self) -> str:
        try:
            line = self._stdin.readline()
        except (OSError, ValueError) as exc:
            raise ConsoleClosedError(f"Failed to read operator input: {exc}") from exc
        if line == "":
            raise ConsoleClosedError("Operator input stream closed.")
        return line.rstrip("\r\n")

    def write_line(self, text: str = "") -> None:
        try:
            self._stdout.write(f"{text}\n")
            self._stdout.flush()
        except RECOVERABLE_OUTPUT_ERRORS:
            log_recoverable(logger, "console_write_failed", level=logging.WARNING)
