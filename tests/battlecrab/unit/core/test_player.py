import pytest

from battlecrab.game.core.errors import AlreadyResolvedError, ShipAlreadyPlacedError
from battlecrab.game.core.models import AttackResult, Cell, Position, RepeatAttackPolicy
from battlecrab.game.core.player import Player


def test_place_ship_then_duplicate_is_rejected() -> None:
    player = Player.create("Alice", board_size=3, ship_count=2)
    position = Position.create(1, 1, 3)
    player.place_ship(position)
    assert player.board.get_cell(position) is Cell.SHIP

    with pytest.raises(ShipAlreadyPlacedError):
        player.place_ship(position)
    assert player.board.get_cell(position) is Cell.SHIP
    assert player.board.count(Cell.SHIP) == 1


def test_is_hit_is_a_pure_query() -> None:
    player = Player.create("Alice", board_size=3, ship_count=1)
    position = Position.create(0, 2, 3)
    assert not player.is_hit(position)
    player.place_ship(position)
    assert player.is_hit(position)
    assert player.board.get_cell(position) is Cell.SHIP
    assert player.remaining_ships == 1


def test_resolve_attack_on_ship_hits_and_decrements() -> None:
    player = Player.create("Bob", board_size=3, ship_count=2)
    position = Position.create(2, 2, 3)
    player.place_ship(position)
    assert player.resolve_attack(position) is AttackResult.HIT
    assert player.board.get_cell(position) is Cell.HIT
    assert player.remaining_ships == 1
    assert not player.has_lost


def test_resolve_attack_on_empty_misses() -> None:
    player = Player.create("Bob", board_size=3, ship_count=1)
    position = Position.create(1, 1, 3)
    assert player.resolve_attack(position) is AttackResult.MISS
    assert player.board.get_cell(position) is Cell.MISS
    assert player.remaining_ships == 1


def test_repeat_attack_rejected_by_default() -> None:
    player = Player.create("Bob", board_size=3, ship_count=1)
    hit = Position.create(0, 0, 3)
    miss = Position.create(0, 1, 3)
    player.place_ship(hit)
    player.resolve_attack(hit)
    player.resolve_attack(miss)

    with pytest.raises(AlreadyResolvedError):
        player.resolve_attack(hit)
    with pytest.raises(AlreadyResolvedError):
        player.resolve_attack(miss)
    assert player.board.get_cell(hit) is Cell.HIT
    assert player.board.get_cell(miss) is Cell.MISS
    assert player.remaining_ships == 0


def test_repeat_attack_counts_as_miss_under_miss_policy() -> None:
    player = Player.create("Bob", board_size=3, ship_count=2)
    hit = Position.create(0, 0, 3)
    player.place_ship(hit)
    player.place_ship(Position.create(2, 2, 3))
    player.resolve_attack(hit)

    result = player.resolve_attack(hit, repeat_policy=RepeatAttackPolicy.MISS)
    assert result is AttackResult.MISS
    assert player.board.get_cell(hit) is Cell.HIT
    assert player.remaining_ships == 1
