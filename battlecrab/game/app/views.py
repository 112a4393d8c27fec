"""Board and status output through the console."""

from __future__ import annotations

from battlecrab.game.core.player import Player
from engine.api.console import ConsolePort


def show_board(console: ConsolePort, player: Player, *, reveal_ships: bool) -> None:
    """Print ``<name>'s board:`` followed by the owner or opponent view."""
    console.write_line(f"{player.name}'s board:")
    show_grid(console, player, reveal_ships=reveal_ships)


def show_grid(console: ConsolePort, player: Player, *, reveal_ships: bool) -> None:
    for line in player.board.render(reveal_ships=reveal_ships).split("\n")[:-1]:
        console.write_line(line)
    console.write_line()
