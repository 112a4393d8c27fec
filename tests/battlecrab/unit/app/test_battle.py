import pytest

from battlecrab.game.app.services.battle import BattleFlow, run_battle
from battlecrab.game.app.state_machine import BattlePhase
from battlecrab.game.core.models import AttackResult, RepeatAttackPolicy
from engine.api.console import ConsoleClosedError


def test_single_turn_output_and_views(console_factory, small_game) -> None:
    console = console_factory("1", "1")
    outcome = BattleFlow(console, small_game).play_turn()

    assert outcome.result is AttackResult.MISS
    assert small_game.attacker is small_game.players[1]
    assert console.output == [
        "Alice's turn",
        "Alice's board:",
        "SOO",
        "OOO",
        "OOO",
        "",
        "Bob's board:",
        "OOO",
        "OOO",
        "OOO",
        "",
        "Where would you like to attack?",
        "Enter row coordinate: ",
        "Enter col coordinate: ",
        "Miss!",
        "Bob's board:",
        "OOO",
        "OMO",
        "OOO",
        "",
    ]


def test_first_hit_wins_and_stops(console_factory, small_game) -> None:
    console = console_factory("2", "2", "0", "0")
    flow = BattleFlow(console, small_game)
    winner = flow.run()

    assert winner is small_game.players[0]
    assert small_game.players[1].remaining_ships == 0
    assert not small_game.running
    assert flow.machine.state is BattlePhase.FINISHED
    assert flow.machine.history == (
        BattlePhase.READY,
        BattlePhase.TURN_IN_PROGRESS,
        BattlePhase.FINISHED,
    )
    assert console.output[0] == "BattleCrab Game Begins!"
    assert "Hit!" in console.output
    assert console.output[-1] == "Alice wins!"
    assert console.output.count("Alice's turn") == 1
    assert "Bob's turn" not in console.output
    assert console.remaining == 2


def test_miss_hands_turn_to_other_player(console_factory, small_game) -> None:
    console = console_factory("1", "1", "0", "0")
    winner = run_battle(console, small_game)

    assert winner is small_game.players[1]
    output = console.output
    assert output.index("Alice's turn") < output.index("Miss!") < output.index("Bob's turn")
    assert output[-1] == "Bob wins!"


def test_invalid_attack_input_never_advances_turn(console_factory, small_game) -> None:
    console = console_factory("9", "2", "a", "2")
    winner = run_battle(console, small_game)
    assert winner is small_game.players[0]
    assert "Invalid row coordinate" in console.output
    assert "Invalid col coordinate" in console.output
    assert console.output.count("Alice's turn") == 1


def test_repeat_attack_is_rejected_and_reprompted(console_factory, small_game) -> None:
    console = console_factory("1", "1", "1", "1", "1", "1", "2", "2")
    winner = run_battle(console, small_game)

    assert winner is small_game.players[0]
    assert console.output.count("Already attacked that position") == 1
    assert console.output.count("Alice's turn") == 2
    assert console.output.count("Bob's turn") == 1


def test_repeat_attack_counts_as_miss_under_miss_policy(console_factory, small_game) -> None:
    console = console_factory("1", "1", "1", "1", "1", "1", "0", "0")
    winner = run_battle(console, small_game, repeat_policy=RepeatAttackPolicy.MISS)

    assert winner is small_game.players[1]
    assert "Already attacked that position" not in console.output
    assert console.output.count("Miss!") == 3


def test_closed_console_aborts_battle(console_factory, small_game) -> None:
    flow = BattleFlow(console_factory("1"), small_game)
    with pytest.raises(ConsoleClosedError):
        flow.run()
    assert flow.machine.state is BattlePhase.TURN_IN_PROGRESS
    assert small_game.running
