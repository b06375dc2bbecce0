"""
Game state management for Tic-Tac-Toe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field

from .config import GameConfig


class Cell(Enum):
    """The three things a cell can hold."""
    EMPTY = GameConfig.EMPTY_MARK
    HUMAN = GameConfig.HUMAN_MARK
    COMPUTER = GameConfig.COMPUTER_MARK

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.HUMAN:
            return Cell.COMPUTER
        if self == Cell.COMPUTER:
            return Cell.HUMAN
        return Cell.EMPTY


class Outcome(Enum):
    """Result of looking at a board."""
    COMPUTER_WIN = "computer_win"
    HUMAN_WIN = "human_win"
    DRAW = "draw"
    ONGOING = "ongoing"


# A board is 9 cells, index = row * 3 + col
Board = List[Cell]


def new_board() -> Board:
    """Create an all-empty board."""
    return [Cell.EMPTY for _ in range(GameConfig.NUM_CELLS)]


def parse_board(text: str) -> Board:
    """
    Build a board from 9 marks, e.g. "OO_XX____".

    "_" and " " are empty cells.
    """
    if len(text) != GameConfig.NUM_CELLS:
        raise ValueError(f"Board needs {GameConfig.NUM_CELLS} cells, got {len(text)}")
    return [Cell.EMPTY if ch == "_" else Cell(ch) for ch in text]


def get_empty_cells(board: Board) -> List[int]:
    """Indices of every empty cell, in order 0-8."""
    return [i for i, cell in enumerate(board) if cell == Cell.EMPTY]


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Cell            # Who made the move
    cell: int               # Cell index (0-8)
    move_number: int        # Which move of the game this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one Tic-Tac-Toe session.

    Tracks:
    - The 9-cell board
    - Current player (X always starts)
    - Move history
    - Game result (set by WinChecker.update_game_state)
    """

    board: Board = field(default_factory=new_board)

    # X moves first
    current_player: Cell = Cell.HUMAN

    moves: List[Move] = field(default_factory=list)

    outcome: Outcome = Outcome.ONGOING

    @property
    def is_game_over(self) -> bool:
        return self.outcome != Outcome.ONGOING

    def make_move(self, cell: int) -> bool:
        """
        Place the current player's mark.

        Args:
            cell: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= cell < GameConfig.NUM_CELLS:
            print(f"Cell {cell} is off the board!")
            return False

        if self.board[cell] != Cell.EMPTY:
            print(f"Cell {cell} is already occupied!")
            return False

        self.board[cell] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            cell=cell,
            move_number=len(self.moves)
        ))

        # Winner is checked by WinChecker, just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        return get_empty_cells(self.board)

    def reset(self):
        """Start a fresh session."""
        self.board = new_board()
        self.current_player = Cell.HUMAN
        self.moves = []
        self.outcome = Outcome.ONGOING

    def render(self, config: Optional[GameConfig] = None) -> str:
        """Board as text, framed by the rule lines."""
        config = config or GameConfig()
        rule = config.LINE_CHAR * config.LINE_WIDTH
        lines = ["", rule]
        size = config.BOARD_SIZE
        for row in range(size):
            cells = self.board[row * size:(row + 1) * size]
            lines.append(" " + " | ".join(c.value for c in cells) + " ")
            if row < size - 1:
                lines.append(config.ROW_SEPARATOR)
        lines.append(rule)
        lines.append("")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print(self.render())
