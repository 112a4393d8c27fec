"""Board state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from battlecrab.game.core.errors import InvalidBoardSizeError, OutOfBoundsError
from battlecrab.game.core.models import MAX_BOARD_SIZE, Cell, Position


@dataclass(slots=True, eq=False)
class Board:
    """Numpy-backed square grid of cells."""

    size: int
    cells: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise InvalidBoardSizeError(f"Board size must be positive, got {self.size}.")
        if self.size > MAX_BOARD_SIZE:
            raise InvalidBoardSizeError(f"Board size must be at most {MAX_BOARD_SIZE}")
        self.cells = np.full((self.size, self.size), int(Cell.EMPTY), dtype=np.int8)

    def get_cell(self, position: Position) -> Cell:
        """Return the cell state at a position."""
        row, col = self._indices(position)
        return Cell(int(self.cells[row, col]))

    def set_cell(self, position: Position, cell: Cell) -> None:
        """Write a cell state. Transition legality is enforced by callers."""
        row, col = self._indices(position)
        self.cells[row, col] = int(cell)

    def count(self, cell: Cell) -> int:
        """Return how many cells currently hold the given state."""
        return int(np.count_nonzero(self.cells == int(cell)))

    def render(self, *, reveal_ships: bool) -> str:
        """Render one glyph per cell, one line per row, each ending in a newline.

        Hidden ships render as empty water so the opponent view leaks nothing.
        """
        lines: list[str] = []
        for row in self.cells:
            glyphs = []
            for value in row:
                cell = Cell(int(value))
                if cell is Cell.SHIP and not reveal_ships:
                    cell = Cell.EMPTY
                glyphs.append(cell.glyph)
            lines.append("".join(glyphs))
        return "\n".join(lines) + "\n"

    def _indices(self, position: Position) -> tuple[int, int]:
        # Positions carry the size they were validated against.
        if position.board_size != self.size:
            raise OutOfBoundsError(
                max(position.row.value, position.col.value),
                self.size,
                f"Position {position} belongs to a board of size {position.board_size}, "
                f"not {self.size}.",
            )
        return position.row.value, position.col.value
