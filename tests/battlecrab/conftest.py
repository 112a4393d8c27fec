from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

import pytest

from battlecrab.game.core.models import Position
from battlecrab.game.core.rules import GameState, create_game
from engine.api.console import ConsoleClosedError


class ScriptedConsole:
    """In-memory console replaying scripted input lines and capturing output."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = deque(lines)
        self.output: list[str] = []

    def read_line(self) -> str:
        if not self._lines:
            raise ConsoleClosedError("Script exhausted.")
        return self._lines.popleft()

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def remaining(self) -> int:
        return len(self._lines)


@pytest.fixture
def console_factory():
    def _make(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(lines)

    return _make


@pytest.fixture
def small_game() -> GameState:
    """3x3 game, one ship each: Alice at (0, 0), Bob at (2, 2)."""
    state = create_game(("Alice", "Bob"), ship_count=1, board_size=3)
    state.players[0].place_ship(Position.create(0, 0, 3))
    state.players[1].place_ship(Position.create(2, 2, 3))
    return state


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    from engine.runtime.logging import shutdown_engine_logging

    shutdown_engine_logging()
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)
