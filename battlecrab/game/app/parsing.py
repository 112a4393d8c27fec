"""Pure parsers turning raw operator lines into validated values."""

from __future__ import annotations

import re

from battlecrab.game.core.models import Index

_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+", re.ASCII)


class MalformedInputError(ValueError):
    """Operator line that cannot be parsed into the requested value."""


def parse_name(text: str) -> str:
    name = text.strip()
    if not name:
        raise MalformedInputError("Player name must not be empty.")
    return name


def parse_int(text: str) -> int:
    raw = text.strip()
    if not _WHOLE_NUMBER.fullmatch(raw):
        raise MalformedInputError(f"Not a whole number: {raw!r}.")
    return int(raw)


def parse_positive_int(text: str) -> int:
    value = parse_int(text)
    if value <= 0:
        raise MalformedInputError(f"Expected a positive number, got {value}.")
    return value


def parse_index(text: str, board_size: int) -> Index:
    """Parse one coordinate. Raises MalformedInputError or OutOfBoundsError."""
    return Index.create(parse_int(text), board_size)
