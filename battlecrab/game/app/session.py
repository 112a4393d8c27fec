"""One complete game session: setup followed by battle."""

from __future__ import annotations

import logging

from battlecrab.game.app.services import run_battle, run_setup
from battlecrab.game.core.models import RepeatAttackPolicy
from battlecrab.game.core.rules import GameState
from engine.api.console import ConsolePort

logger = logging.getLogger(__name__)


def run_session(
    console: ConsolePort,
    *,
    repeat_policy: RepeatAttackPolicy = RepeatAttackPolicy.REJECT,
) -> GameState:
    """Run setup and the turn engine to completion and return the finished state."""
    state = run_setup(console)
    logger.info("setup_complete repeat_policy=%s", repeat_policy.value)
    run_battle(console, state, repeat_policy=repeat_policy)
    return state
