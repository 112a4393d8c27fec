"""Player identity, owned board and ship bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass

from battlecrab.game.core.board import Board
from battlecrab.game.core.errors import AlreadyResolvedError, ShipAlreadyPlacedError
from battlecrab.game.core.models import AttackResult, Cell, Position, RepeatAttackPolicy


@dataclass(slots=True)
class Player:
    """Named player owning one board and a count of unsunk ship cells."""

    name: str
    board: Board
    remaining_ships: int

    @classmethod
    def create(cls, name: str, board_size: int, ship_count: int) -> Player:
        return cls(name=name, board=Board(board_size), remaining_ships=ship_count)

    @property
    def has_lost(self) -> bool:
        return self.remaining_ships == 0

    def place_ship(self, position: Position) -> None:
        """Put a ship on this player's board."""
        if self.board.get_cell(position) is Cell.SHIP:
            raise ShipAlreadyPlacedError(f"Ship already placed at {position}.")
        self.board.set_cell(position, Cell.SHIP)

    def is_hit(self, position: Position) -> bool:
        return self.board.get_cell(position) is Cell.SHIP

    def resolve_attack(
        self,
        position: Position,
        *,
        repeat_policy: RepeatAttackPolicy = RepeatAttackPolicy.REJECT,
    ) -> AttackResult:
        """Resolve an incoming attack on this player's board.

        This is the only place ``remaining_ships`` changes. Attacking a cell that
        is already hit or missed raises ``AlreadyResolvedError`` under the
        ``REJECT`` policy; under ``MISS`` it reports a miss and leaves the cell as is.
        """
        if self.is_hit(position):
            self.board.set_cell(position, Cell.HIT)
            self.remaining_ships -= 1
            return AttackResult.HIT

        current = self.board.get_cell(position)
        if current is not Cell.EMPTY:
            if repeat_policy is RepeatAttackPolicy.REJECT:
                raise AlreadyResolvedError(f"{position} was already attacked.")
            return AttackResult.MISS

        self.board.set_cell(position, Cell.MISS)
        return AttackResult.MISS
