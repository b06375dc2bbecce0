"""
Win checker for Tic-Tac-Toe.
Scores a board and decides if the game is won, drawn, or still going.
"""

from typing import Optional, Tuple

from .config import GameConfig
from .game_state import Board, Cell, GameState, Outcome


# All possible winning lines (as cell indices)
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the first complete line, if there is one.

    Args:
        board: The 9-cell board.

    Returns:
        The winning line as 3 cell indices, or None.
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] != Cell.EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def evaluate(board: Board) -> int:
    """
    Score a board from the computer's point of view.

    Returns:
        +10 if the computer has a complete line, -10 if the human has one,
        0 otherwise (draw or game still going).
    """
    line = get_winning_line(board)
    if line is None:
        return 0
    if board[line[0]] == Cell.COMPUTER:
        return GameConfig.WIN_SCORE
    return -GameConfig.WIN_SCORE


def moves_left(board: Board) -> bool:
    """True if at least one cell is empty."""
    return Cell.EMPTY in board


def check_win(board: Board) -> Outcome:
    """
    Classify a board for the turn loop.

    Returns:
        COMPUTER_WIN, HUMAN_WIN, DRAW (full board, no line) or ONGOING.
    """
    score = evaluate(board)
    if score == GameConfig.WIN_SCORE:
        return Outcome.COMPUTER_WIN
    if score == -GameConfig.WIN_SCORE:
        return Outcome.HUMAN_WIN
    if not moves_left(board):
        return Outcome.DRAW
    return Outcome.ONGOING


class WinChecker:
    """
    Checks for win conditions in Tic-Tac-Toe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with the outcome of its board.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.outcome = check_win(game_state.board)
        return game_state
