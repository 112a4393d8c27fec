"""Application service-layer flows."""

from battlecrab.game.app.services.battle import BattleFlow, run_battle
from battlecrab.game.app.services.setup_flow import PlacementProgress, SetupFlow, run_setup

__all__ = [
    "BattleFlow",
    "PlacementProgress",
    "SetupFlow",
    "run_battle",
    "run_setup",
]
