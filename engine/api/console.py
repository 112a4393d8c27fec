"""Public line-oriented console API contracts."""

from __future__ import annotations

from typing import Protocol, TextIO


class ConsoleClosedError(OSError):
    """Raised when the operator input stream is closed or unreadable."""


class ConsolePort(Protocol):
    """Narrow text I/O boundary consumed by game flows."""

    def read_line(self) -> str:
        """Block for one line of operator input, without the line terminator."""

    def write_line(self, text: str = "") -> None:
        """Emit one line of output. Best-effort."""


def create_stdio_console(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> ConsolePort:
    """Create default console implementation over text streams."""
    from engine.runtime.console import StdioConsole

    return StdioConsole(stdin=stdin, stdout=stdout)
