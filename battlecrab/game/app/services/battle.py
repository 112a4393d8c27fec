"""Battle flow: alternating attacks until one fleet is gone."""

from __future__ import annotations

import logging

from battlecrab.game.app.prompts import prompt_position
from battlecrab.game.app.state_machine import BATTLE_TRANSITIONS, BattlePhase
from battlecrab.game.app.views import show_board
from battlecrab.game.core.errors import AlreadyResolvedError
from battlecrab.game.core.models import AttackResult, RepeatAttackPolicy
from battlecrab.game.core.player import Player
from battlecrab.game.core.rules import GameState, TurnOutcome, resolve_turn
from engine.api.console import ConsolePort
from engine.api.flow import FlowMachine, create_flow_machine

logger = logging.getLogger(__name__)


class BattleFlow:
    """Turn engine driving a ready game to a winner."""

    def __init__(
        self,
        console: ConsolePort,
        state: GameState,
        *,
        repeat_policy: RepeatAttackPolicy = RepeatAttackPolicy.REJECT,
    ) -> None:
        self._console = console
        self.state = state
        self.repeat_policy = repeat_policy
        self.machine: FlowMachine[BattlePhase] = create_flow_machine(
            BattlePhase.READY, BATTLE_TRANSITIONS
        )

    def run(self) -> Player:
        """Play turns until a winner is announced and return the winner."""
        self._console.write_line("BattleCrab Game Begins!")
        self.machine.require("start")
        while self.state.running:
            outcome = self.play_turn()
            if outcome.winner is not None:
                self._console.write_line(f"{outcome.winner.name} wins!")
                self.machine.require("win")
                return outcome.winner
            self.machine.require("next_turn")
        raise RuntimeError("Battle ended without a winner.")

    def play_turn(self) -> TurnOutcome:
        """Run one attack-and-resolve cycle for the active player."""
        attacker = self.state.attacker
        target = self.state.target
        self._console.write_line(f"{attacker.name}'s turn")
        show_board(self._console, attacker, reveal_ships=True)
        show_board(self._console, target, reveal_ships=False)

        outcome = self._attack()
        self._console.write_line("Hit!" if outcome.result is AttackResult.HIT else "Miss!")
        show_board(self._console, target, reveal_ships=False)
        return outcome

    def _attack(self) -> TurnOutcome:
        while True:
            self._console.write_line("Where would you like to attack?")
            position = prompt_position(self._console, self.state.board_size)
            try:
                return resolve_turn(self.state, position, repeat_policy=self.repeat_policy)
            except AlreadyResolvedError:
                logger.debug(
                    "attack_rejected attacker=%s position=%s", self.state.attacker.name, position
                )
                self._console.write_line("Already attacked that position")


def run_battle(
    console: ConsolePort,
    state: GameState,
    *,
    repeat_policy: RepeatAttackPolicy = RepeatAttackPolicy.REJECT,
) -> Player:
    """Run the turn engine against a console and return the winner."""
    return BattleFlow(console, state, repeat_policy=repeat_policy).run()
