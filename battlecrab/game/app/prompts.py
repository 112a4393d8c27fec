"""Console prompt loops that re-ask until a parser accepts the line."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from battlecrab.game.app.parsing import MalformedInputError, parse_index
from battlecrab.game.core.errors import GameRuleError, OutOfBoundsError
from battlecrab.game.core.models import Position
from engine.api.console import ConsolePort

logger = logging.getLogger(__name__)


def prompt_until_valid[T](
    console: ConsolePort,
    prompt: str,
    parse: Callable[[str], T],
    *,
    invalid_message: str,
) -> T:
    """Prompt until ``parse`` accepts a line.

    Malformed and out-of-range input prints ``invalid_message``; any other rule
    violation prints its own message. Console failures propagate.
    """
    while True:
        console.write_line(prompt)
        raw = console.read_line()
        try:
            return parse(raw)
        except (MalformedInputError, OutOfBoundsError) as exc:
            logger.debug("input_rejected prompt=%r reason=%s", prompt.strip(), exc)
            console.write_line(invalid_message)
        except GameRuleError as exc:
            logger.debug("input_rejected prompt=%r reason=%s", prompt.strip(), exc)
            console.write_line(str(exc))


def prompt_position(console: ConsolePort, board_size: int) -> Position:
    """Ask for row then col, re-prompting each coordinate on its own."""
    row = prompt_until_valid(
        console,
        "Enter row coordinate: ",
        partial(parse_index, board_size=board_size),
        invalid_message="Invalid row coordinate",
    )
    col = prompt_until_valid(
        console,
        "Enter col coordinate: ",
        partial(parse_index, board_size=board_size),
        invalid_message="Invalid col coordinate",
    )
    return Position(row, col)
