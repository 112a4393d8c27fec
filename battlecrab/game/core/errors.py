"""Domain rule violations raised by core game logic."""

from __future__ import annotations


class GameRuleError(ValueError):
    """Base class for recoverable rule violations."""


class OutOfBoundsError(GameRuleError):
    """Index or position outside the board."""

    def __init__(self, raw: int, board_size: int, message: str | None = None) -> None:
        super().__init__(message or f"{raw} is outside a board of size {board_size}.")
        self.raw = raw
        self.board_size = board_size


class InvalidBoardSizeError(GameRuleError):
    """Board size that cannot produce a playable board."""


class ShipAlreadyPlacedError(GameRuleError):
    """Placement target already holds a ship."""


class AlreadyResolvedError(GameRuleError):
    """Attack target was already hit or missed."""


class GameFinishedError(RuntimeError):
    """Turn requested after a winner was decided."""
