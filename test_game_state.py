"""
Tests for the Tic-Tac-Toe game state.
"""

import pytest

from tictactoe.game_state import Cell, GameState, Move, Outcome, new_board, parse_board


def test_new_game_is_empty_and_x_starts():
    game = GameState()

    assert game.board == [Cell.EMPTY] * 9
    assert game.current_player == Cell.HUMAN
    assert game.moves == []
    assert game.outcome == Outcome.ONGOING
    assert game.get_empty_cells() == list(range(9))


def test_make_move_places_mark_and_switches_turn():
    game = GameState()

    assert game.make_move(4)
    assert game.board[4] == Cell.HUMAN
    assert game.current_player == Cell.COMPUTER

    assert game.make_move(0)
    assert game.board[0] == Cell.COMPUTER
    assert game.current_player == Cell.HUMAN

    assert game.moves == [
        Move(player=Cell.HUMAN, cell=4, move_number=0),
        Move(player=Cell.COMPUTER, cell=0, move_number=1),
    ]


def test_occupied_cell_is_refused(capsys):
    game = GameState()
    game.make_move(4)

    assert not game.make_move(4)
    assert game.current_player == Cell.COMPUTER
    assert len(game.moves) == 1
    assert "already occupied" in capsys.readouterr().out


def test_off_board_cell_is_refused():
    game = GameState()

    assert not game.make_move(9)
    assert not game.make_move(-1)
    assert game.board == new_board()


def test_finished_game_refuses_moves(capsys):
    game = GameState()
    game.outcome = Outcome.DRAW

    assert game.is_game_over
    assert not game.make_move(0)
    assert "already over" in capsys.readouterr().out


def test_reset_starts_fresh_session():
    game = GameState()
    game.make_move(0)
    game.make_move(1)
    game.outcome = Outcome.HUMAN_WIN

    game.reset()

    assert game.board == new_board()
    assert game.current_player == Cell.HUMAN
    assert game.moves == []
    assert not game.is_game_over


def test_render_draws_rows_between_rule_lines():
    game = GameState(board=parse_board("XO__X___O"))

    text = game.render()

    assert text.splitlines() == [
        "",
        "#" * 44,
        " X | O |   ",
        "---+---+---",
        "   | X |   ",
        "---+---+---",
        "   |   | O ",
        "#" * 44,
    ]


def test_cell_opposite():
    assert Cell.HUMAN.opposite() == Cell.COMPUTER
    assert Cell.COMPUTER.opposite() == Cell.HUMAN
    assert Cell.EMPTY.opposite() == Cell.EMPTY


def test_parse_board_accepts_blank_and_underscore():
    assert parse_board("X_ O_ _ O") == [
        Cell.HUMAN, Cell.EMPTY, Cell.EMPTY,
        Cell.COMPUTER, Cell.EMPTY, Cell.EMPTY,
        Cell.EMPTY, Cell.EMPTY, Cell.COMPUTER,
    ]


def test_parse_board_rejects_wrong_length():
    with pytest.raises(ValueError):
        parse_board("XO")
