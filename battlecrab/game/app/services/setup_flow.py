"""Setup phase: names, ship count, board size and ship placement."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial

from battlecrab.game.app.parsing import parse_name, parse_positive_int
from battlecrab.game.app.prompts import prompt_position, prompt_until_valid
from battlecrab.game.app.state_machine import SETUP_TRANSITIONS, SetupPhase
from battlecrab.game.app.views import show_grid
from battlecrab.game.core.errors import ShipAlreadyPlacedError
from battlecrab.game.core.player import Player
from battlecrab.game.core.rules import GameState, check_ship_capacity, create_game
from engine.api.console import ConsolePort
from engine.api.flow import FlowContext, FlowMachine, FlowTransition, create_flow_machine

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlacementProgress:
    """Ships still to place, per player in turn order."""

    remaining: list[int] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return bool(self.remaining) and all(count == 0 for count in self.remaining)


class SetupFlow:
    """Collects setup parameters and placements, producing a ready game."""

    def __init__(self, console: ConsolePort) -> None:
        self._console = console
        self.progress = PlacementProgress()
        self.machine: FlowMachine[SetupPhase] = create_flow_machine(
            SetupPhase.AWAITING_NAMES, self._transitions()
        )

    def run(self) -> GameState:
        """Drive setup to ``READY`` and return the resulting game state."""
        names = (
            prompt_until_valid(
                self._console,
                "Enter player 1 name: ",
                parse_name,
                invalid_message="Invalid player name",
            ),
            prompt_until_valid(
                self._console,
                "Enter player 2 name: ",
                parse_name,
                invalid_message="Invalid player name",
            ),
        )
        self.machine.require("names_entered")

        ship_count = prompt_until_valid(
            self._console,
            "Enter number of ships: ",
            parse_positive_int,
            invalid_message="Invalid number of ships",
        )
        self.machine.require("ship_count_entered")

        board_size = prompt_until_valid(
            self._console,
            "Enter board size: ",
            partial(_parse_board_size, ship_count=ship_count),
            invalid_message="Invalid board size",
        )
        self.machine.require("board_size_entered")

        state = create_game(names, ship_count, board_size)
        logger.info(
            "setup_configured players=%s,%s ship_count=%d board_size=%d",
            names[0],
            names[1],
            ship_count,
            board_size,
        )
        self.progress.remaining = [ship_count for _ in state.players]
        for index, player in enumerate(state.players):
            self._place_fleet(index, player, state.board_size)

        self.machine.require("fleets_placed")
        return state

    def _place_fleet(self, index: int, player: Player, board_size: int) -> None:
        self._console.write_line(f"{player.name} place your ships")
        while self.progress.remaining[index] > 0:
            position = prompt_position(self._console, board_size)
            try:
                player.place_ship(position)
            except ShipAlreadyPlacedError:
                logger.debug("placement_rejected player=%s position=%s", player.name, position)
                self._console.write_line("Ship already placed")
                continue
            self.progress.remaining[index] -= 1
            logger.info("ship_placed player=%s position=%s", player.name, position)
            self._console.write_line("Ship placed")
            self._console.write_line("Current board:")
            show_grid(self._console, player, reveal_ships=True)

    def _transitions(self) -> tuple[FlowTransition[SetupPhase], ...]:
        # Leaving PLACING_SHIPS requires every fleet to be complete.
        return tuple(
            FlowTransition(
                transition.trigger,
                transition.source,
                transition.target,
                guard=self._fleets_complete,
            )
            if transition.trigger == "fleets_placed"
            else transition
            for transition in SETUP_TRANSITIONS
        )

    def _fleets_complete(self, _context: FlowContext[SetupPhase]) -> bool:
        return self.progress.complete


def _parse_board_size(text: str, ship_count: int) -> int:
    board_size = parse_positive_int(text)
    check_ship_capacity(ship_count, board_size)
    return board_size


def run_setup(console: ConsolePort) -> GameState:
    """Run the setup phase against a console."""
    return SetupFlow(console).run()
