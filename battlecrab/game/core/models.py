"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from battlecrab.game.core.errors import OutOfBoundsError

MAX_BOARD_SIZE = 50


class Cell(IntEnum):
    """Per-position board state, stored as int8 in board arrays."""

    EMPTY = 0
    SHIP = 1
    HIT = 2
    MISS = 3

    @property
    def glyph(self) -> str:
        return CELL_GLYPHS[self]


CELL_GLYPHS: dict[Cell, str] = {
    Cell.EMPTY: "O",
    Cell.SHIP: "S",
    Cell.HIT: "H",
    Cell.MISS: "M",
}


class AttackResult(StrEnum):
    """Result of a single attack."""

    HIT = "HIT"
    MISS = "MISS"


class RepeatAttackPolicy(StrEnum):
    """How attacks on already hit or missed cells are handled."""

    REJECT = "reject"
    MISS = "miss"


@dataclass(frozen=True, slots=True)
class Index:
    """Single-axis coordinate, always inside ``[0, board_size)``."""

    value: int
    board_size: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < self.board_size:
            raise OutOfBoundsError(self.value, self.board_size)

    @classmethod
    def create(cls, raw: int, board_size: int) -> Index:
        return cls(raw, board_size)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class Position:
    """Validated (row, col) pair on one board."""

    row: Index
    col: Index

    def __post_init__(self) -> None:
        if self.row.board_size != self.col.board_size:
            raise ValueError("Row and col must be validated against the same board size.")

    @classmethod
    def create(cls, row: int, col: int, board_size: int) -> Position:
        """Build a position from raw integers, raising OutOfBoundsError when either is off-board."""
        return cls(Index.create(row, board_size), Index.create(col, board_size))

    @property
    def board_size(self) -> int:
        return self.row.board_size

    def __str__(self) -> str:
        return f"({self.row.value}, {self.col.value})"
