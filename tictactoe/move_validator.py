"""
Move validator for Tic-Tac-Toe.
Turns what the human typed into a cell index, or explains why it can't.
"""

from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Cell


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    cell: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Tic-Tac-Toe moves typed by a human.

    Rules:
    1. Input must be a whole number
    2. Number must be 1-9
    3. The cell must be empty
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def validate_input(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a typed position.

        Args:
            board: Current board.
            text: Raw text from the prompt, e.g. "5".

        Returns:
            ValidationResult with the 0-based cell when valid.
        """
        try:
            position = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid input. Please enter a number "
                    f"{self.config.FIRST_POSITION}-{self.config.LAST_POSITION}."
                )
            )

        return self.validate_position(board, position)

    def validate_position(self, board: Board, position: int) -> ValidationResult:
        """
        Validate a 1-based board position.

        Args:
            board: Current board.
            position: Position as the human counts it (1-9).

        Returns:
            ValidationResult with the 0-based cell when valid.
        """
        if not self.config.FIRST_POSITION <= position <= self.config.LAST_POSITION:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Position must be "
                    f"{self.config.FIRST_POSITION}..{self.config.LAST_POSITION}."
                )
            )

        cell = position - self.config.FIRST_POSITION
        if board[cell] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message="Cell already taken. Choose another."
            )

        # All checks passed!
        return ValidationResult(is_valid=True, cell=cell)
