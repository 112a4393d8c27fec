"""Game state and turn resolution logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from battlecrab.game.core.errors import GameFinishedError, InvalidBoardSizeError
from battlecrab.game.core.models import (
    MAX_BOARD_SIZE,
    AttackResult,
    Position,
    RepeatAttackPolicy,
)
from battlecrab.game.core.player import Player

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameState:
    """Runtime state of one game session."""

    players: tuple[Player, Player]
    board_size: int
    ship_count: int
    turn_index: int = 0
    running: bool = True
    winner: Player | None = None
    last_message: str = ""
    history: list[str] = field(default_factory=list)

    @property
    def attacker(self) -> Player:
        return self.players[self.turn_index % 2]

    @property
    def target(self) -> Player:
        return self.players[(self.turn_index + 1) % 2]


@dataclass(frozen=True, slots=True)
class TurnOutcome:
    """Outcome of one resolved attack."""

    attacker: Player
    target: Player
    position: Position
    result: AttackResult
    winner: Player | None


def create_game(names: tuple[str, str], ship_count: int, board_size: int) -> GameState:
    """Create a game with two empty boards of the given size."""
    if ship_count <= 0:
        raise ValueError(f"Ship count must be positive, got {ship_count}.")
    check_ship_capacity(ship_count, board_size)
    players = (
        Player.create(names[0], board_size, ship_count),
        Player.create(names[1], board_size, ship_count),
    )
    return GameState(players=players, board_size=board_size, ship_count=ship_count)


def check_ship_capacity(ship_count: int, board_size: int) -> None:
    """Reject unplayable boards: oversized, or with fewer cells than ships."""
    if board_size <= 0:
        raise InvalidBoardSizeError(f"Board size must be positive, got {board_size}.")
    if board_size > MAX_BOARD_SIZE:
        raise InvalidBoardSizeError(f"Board size must be at most {MAX_BOARD_SIZE}")
    if ship_count > board_size * board_size:
        raise InvalidBoardSizeError(f"Board too small for {ship_count} ships")


def resolve_turn(
    state: GameState,
    position: Position,
    *,
    repeat_policy: RepeatAttackPolicy = RepeatAttackPolicy.REJECT,
) -> TurnOutcome:
    """Resolve the active player's attack, then either finish the game or pass the turn.

    Raises ``AlreadyResolvedError`` (turn not consumed) when the target cell was
    already attacked under the ``REJECT`` policy.
    """
    if not state.running:
        raise GameFinishedError("Game is already finished.")

    attacker = state.attacker
    target = state.target
    result = target.resolve_attack(position, repeat_policy=repeat_policy)
    _record(state, f"{attacker.name} fired at {position}: {result.value.lower()}.")
    logger.info(
        "attack_resolved attacker=%s target=%s position=%s result=%s remaining=%d",
        attacker.name,
        target.name,
        position,
        result.value,
        target.remaining_ships,
    )

    if target.has_lost:
        state.running = False
        state.winner = attacker
        _record(state, f"{attacker.name} wins.")
        logger.info("game_finished winner=%s turns=%d", attacker.name, state.turn_index + 1)
    else:
        state.turn_index += 1

    return TurnOutcome(
        attacker=attacker,
        target=target,
        position=position,
        result=result,
        winner=state.winner,
    )


def _record(state: GameState, message: str) -> None:
    state.last_message = message
    state.history.append(message)
