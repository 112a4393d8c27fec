"""Setup and battle phase transitions."""

from __future__ import annotations

from enum import Enum, auto

from engine.api.flow import FlowTransition


class SetupPhase(Enum):
    """Pre-play configuration phases."""

    AWAITING_NAMES = auto()
    AWAITING_SHIP_COUNT = auto()
    AWAITING_BOARD_SIZE = auto()
    PLACING_SHIPS = auto()
    READY = auto()


class BattlePhase(Enum):
    """Play phases from readiness to a decided winner."""

    READY = auto()
    TURN_IN_PROGRESS = auto()
    FINISHED = auto()


SETUP_TRANSITIONS: tuple[FlowTransition[SetupPhase], ...] = (
    FlowTransition("names_entered", SetupPhase.AWAITING_NAMES, SetupPhase.AWAITING_SHIP_COUNT),
    FlowTransition(
        "ship_count_entered", SetupPhase.AWAITING_SHIP_COUNT, SetupPhase.AWAITING_BOARD_SIZE
    ),
    FlowTransition("board_size_entered", SetupPhase.AWAITING_BOARD_SIZE, SetupPhase.PLACING_SHIPS),
    FlowTransition("fleets_placed", SetupPhase.PLACING_SHIPS, SetupPhase.READY),
)

BATTLE_TRANSITIONS: tuple[FlowTransition[BattlePhase], ...] = (
    FlowTransition("start", BattlePhase.READY, BattlePhase.TURN_IN_PROGRESS),
    FlowTransition("next_turn", BattlePhase.TURN_IN_PROGRESS, BattlePhase.TURN_IN_PROGRESS),
    FlowTransition("win", BattlePhase.TURN_IN_PROGRESS, BattlePhase.FINISHED),
)
