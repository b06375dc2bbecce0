"""
AI player for Tic-Tac-Toe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional

from .config import GameConfig
from .game_state import Board, Cell, get_empty_cells
from .win_checker import evaluate, moves_left


class AIPlayer:
    """
    An AI that plays Tic-Tac-Toe using the Minimax algorithm.

    The AI always plays the computer's mark (O). It will win if possible,
    block the human if needed, and never lose (at worst, draw).

    Scores are from the computer's point of view: a win found `depth`
    plies down is worth 10 - depth, a loss -10 + depth, so faster wins and
    slower losses are preferred.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            config: Game settings (scores, debug output).
        """
        self.config = config or GameConfig()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def find_best_move(self, board: Board) -> int:
        """
        Get the best cell for the computer.

        Every empty cell is tried in order 0-8 and scored with minimax.
        The first cell with the highest score wins ties.

        Args:
            board: Current board. Not modified.

        Returns:
            Cell index (0-8), or -1 if the board is full.
        """
        self.positions_evaluated = 0

        best_score = float('-inf')
        best_move = -1

        for cell in get_empty_cells(board):
            # Try this move
            new_board = list(board)
            new_board[cell] = Cell.COMPUTER

            # Human moves next
            score = self.minimax(new_board, depth=0, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = cell

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Called with the default window the returned score is exact, so
        pruning never changes which move find_best_move picks.

        Args:
            board: Current board. Not modified.
            depth: Plies played since the move being scored.
            is_maximizing: True if it is the computer's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        score = evaluate(board)

        if score == self.config.WIN_SCORE:
            return score - depth  # Win (prefer faster wins)
        if score == -self.config.WIN_SCORE:
            return score + depth  # Loss (prefer slower losses)
        if not moves_left(board):
            return 0  # Draw

        if is_maximizing:
            best = float('-inf')
            for cell in get_empty_cells(board):
                new_board = list(board)
                new_board[cell] = Cell.COMPUTER
                best = max(best, self.minimax(new_board, depth + 1, False, alpha, beta))
                alpha = max(alpha, best)
                if beta <= alpha:
                    break  # Prune
            return best
        else:
            best = float('inf')
            for cell in get_empty_cells(board):
                new_board = list(board)
                new_board[cell] = Cell.HUMAN
                best = min(best, self.minimax(new_board, depth + 1, True, alpha, beta))
                beta = min(beta, best)
                if beta <= alpha:
                    break  # Prune
            return best

    def choose_move(self, board: Board) -> Optional[int]:
        """
        Pick the computer's move for the turn loop.

        Falls back to the first empty cell if the search reports no move.

        Returns:
            Cell index (0-8), or None if the board is full.
        """
        move = self.find_best_move(board)
        if move == -1:
            empty = get_empty_cells(board)
            if not empty:
                return None
            move = empty[0]
        return move

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.choose_move(board)

        if move is None:
            return "No moves available!"

        return f"Place {Cell.COMPUTER.value} at position {move + self.config.FIRST_POSITION}"


def minimax(board: Board, depth: int, maximizing: bool) -> int:
    """Score a board with a fresh AIPlayer. See AIPlayer.minimax."""
    return AIPlayer().minimax(board, depth, maximizing)


def find_best_move(board: Board) -> int:
    """Best cell for the computer, or -1 on a full board."""
    return AIPlayer().find_best_move(board)
