"""
Tests for the console driver, with scripted input.
"""

import builtins

import pytest

import main
from main import TWO_PLAYERS, VS_COMPUTER, TicTacToeConsole
from tictactoe.game_state import Cell, Outcome


def scripted(*answers):
    """input() replacement that replays the given answers in order."""
    answers = iter(answers)
    return lambda prompt="": next(answers)


def first_empty_cell(console):
    """input() replacement that always picks the lowest free position."""
    return lambda prompt="": str(console.game_state.get_empty_cells()[0] + 1)


def test_two_players_x_wins_after_bad_input(capsys):
    console = TicTacToeConsole(input_fn=scripted("1", "abc", "0", "1", "4", "2", "5", "3"))

    outcome = console.run(mode=TWO_PLAYERS)
    out = capsys.readouterr().out

    assert outcome == Outcome.HUMAN_WIN
    assert "Invalid input. Please enter a number 1-9." in out
    assert "Position must be 1..9." in out
    assert "Cell already taken. Choose another." in out
    assert " Player O's turn." in out
    assert " X (Player 1) wins!" in out


def test_two_players_o_wins(capsys):
    console = TicTacToeConsole(input_fn=scripted("1", "4", "2", "5", "9", "6"))

    outcome = console.two_player_game()

    assert outcome == Outcome.COMPUTER_WIN
    assert console.game_state.board[3:6] == [Cell.COMPUTER] * 3
    assert " O (Player 2) wins!" in capsys.readouterr().out


def test_two_players_draw(capsys):
    console = TicTacToeConsole(input_fn=scripted("1", "2", "3", "5", "4", "6", "8", "7", "9"))

    outcome = console.two_player_game()

    assert outcome == Outcome.DRAW
    assert " It's a draw!" in capsys.readouterr().out


def test_computer_first_opens_in_corner(capsys):
    console = TicTacToeConsole()
    console.input_fn = first_empty_cell(console)

    outcome = console.run(mode=VS_COMPUTER, human_first=False)
    out = capsys.readouterr().out

    assert " Computer chose position 1." in out
    assert console.game_state.moves[0].player == Cell.COMPUTER
    assert outcome in (Outcome.COMPUTER_WIN, Outcome.DRAW)


def test_human_first_cannot_beat_computer(capsys):
    console = TicTacToeConsole()
    console.input_fn = first_empty_cell(console)

    outcome = console.human_vs_computer(human_first=True)
    out = capsys.readouterr().out

    assert console.game_state.moves[0].player == Cell.HUMAN
    assert outcome != Outcome.HUMAN_WIN
    assert " Computer is thinking..." in out
    if outcome == Outcome.COMPUTER_WIN:
        assert " Computer (O) wins!" in out


def test_computer_wins_against_blunders(capsys):
    # Human X: 1, 2, 7, then 8; computer answers 5, 3, 4 and completes 4-5-6
    console = TicTacToeConsole(input_fn=scripted("y", "1", "2", "7", "8", "9"))

    outcome = console.run(mode=VS_COMPUTER)
    out = capsys.readouterr().out

    assert outcome == Outcome.COMPUTER_WIN
    assert " Computer (O) wins!" in out


@pytest.mark.parametrize("answer, human_first", [("y", True), ("Y", True), ("yes", True), ("n", False), ("", False)])
def test_ask_human_first(answer, human_first):
    console = TicTacToeConsole(input_fn=scripted(answer))

    assert console.ask_human_first() is human_first


def test_menu_rejects_non_number(capsys):
    console = TicTacToeConsole(input_fn=scripted("two"))

    assert console.run() is None
    assert "Invalid input. Exiting." in capsys.readouterr().out


def test_menu_rejects_unknown_mode(capsys):
    console = TicTacToeConsole(input_fn=scripted("3"))

    assert console.run() is None
    assert "Unknown mode. Exiting." in capsys.readouterr().out


def test_menu_picks_two_players(capsys):
    console = TicTacToeConsole(input_fn=scripted("1", "1", "4", "2", "5", "3"))

    assert console.run() == Outcome.HUMAN_WIN
    assert "Two-player mode" in capsys.readouterr().out


def test_main_ends_cleanly_on_end_of_input(monkeypatch, capsys):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", no_more_input)

    main.main(["--mode", "2", "--human-first"])
    out = capsys.readouterr().out

    assert "Game interrupted by user." in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_rejects_bad_mode():
    with pytest.raises(SystemExit):
        main.main(["--mode", "5"])


def test_consoles_do_not_share_config():
    first = TicTacToeConsole()
    first.config.DEBUG_MODE = True

    second = TicTacToeConsole()

    assert not second.config.DEBUG_MODE
    assert second.ai.config is second.config
    assert second.validator.config is second.config
