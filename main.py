"""
Main console script for Tic-Tac-Toe.

This script ties together:
- Game state and the win checker
- Move validation for what the human types
- The minimax AI opponent

Run this script to play Tic-Tac-Toe against a friend or the computer!
"""

import argparse
from typing import Callable, Optional

from tictactoe.config import GameConfig
from tictactoe.game_state import Cell, GameState, Outcome
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import WinChecker
from tictactoe.ai_player import AIPlayer


TWO_PLAYERS = 1
VS_COMPUTER = 2


class TicTacToeConsole:
    """
    Console front end for Tic-Tac-Toe.

    Game flow:
    1. Pick a mode (two players, or human vs computer)
    2. Players take turns typing a position 1-9
    3. The computer (O) answers with its minimax move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_fn: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            config: Game settings.
            input_fn: Where typed text comes from (input() by default).
        """
        self.config = config or GameConfig()
        self.input_fn = input_fn or input

        self.game_state = GameState()
        self.validator = MoveValidator(self.config)
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.config)

    def line_style(self):
        print(self.config.LINE_CHAR * self.config.LINE_WIDTH)

    def boxed(self, message: str):
        """Print a message between two rule lines."""
        self.line_style()
        print(message)
        self.line_style()

    def show_title(self):
        self.boxed("          === Tic-Tac-Toe Game ===")

    def choose_mode(self) -> Optional[int]:
        """
        Ask which mode to play.

        Returns:
            TWO_PLAYERS, VS_COMPUTER, or None if the answer is unusable.
        """
        print("1) Two players")
        print("2) Play vs Computer (AI)")
        answer = self.input_fn("Choose mode (1 or 2): ")

        try:
            mode = int(answer.strip())
        except ValueError:
            print("Invalid input. Exiting.")
            return None

        if mode not in (TWO_PLAYERS, VS_COMPUTER):
            print("Unknown mode. Exiting.")
            return None

        return mode

    def prompt_move(self) -> int:
        """
        Ask the human for a move until they give a valid one.

        Returns:
            The chosen cell index (0-8).
        """
        while True:
            text = self.input_fn(
                f"Enter your move ({self.config.FIRST_POSITION}-{self.config.LAST_POSITION}): "
            )
            result = self.validator.validate_input(self.game_state.board, text)
            if result.is_valid:
                return result.cell
            print(result.error_message)

    def ask_human_first(self) -> bool:
        answer = self.input_fn("Do you want to go first? (y/n): ")
        return answer.strip()[:1] in ("y", "Y")

    def two_player_game(self) -> Outcome:
        """Play X (Player 1) against O (Player 2) on one console."""
        self.game_state.reset()

        self.boxed(" Two-player mode. X = Player1, O = Player2")
        self.game_state.print_board()

        while not self.game_state.is_game_over:
            if self.game_state.current_player == Cell.HUMAN:
                self.boxed(" Player X's turn.")
            else:
                self.boxed(" Player O's turn.")

            self.game_state.make_move(self.prompt_move())
            self.game_state.print_board()
            self.win_checker.update_game_state(self.game_state)

        outcome = self.game_state.outcome
        if outcome == Outcome.COMPUTER_WIN:
            self.boxed(" O (Player 2) wins!")
        elif outcome == Outcome.HUMAN_WIN:
            self.boxed(" X (Player 1) wins!")
        else:
            self.boxed(" It's a draw!")

        return outcome

    def human_vs_computer(self, human_first: Optional[bool] = None) -> Outcome:
        """
        Play the human (X) against the minimax AI (O).

        Args:
            human_first: Who starts. None means ask.
        """
        self.game_state.reset()

        self.boxed(" Human vs Computer\n You are X. Computer is O.")
        self.game_state.print_board()

        if human_first is None:
            human_first = self.ask_human_first()
        if not human_first:
            self.game_state.current_player = Cell.COMPUTER

        while not self.game_state.is_game_over:
            if self.game_state.current_player == Cell.HUMAN:
                self.boxed(" Your move (X):")
                self.game_state.make_move(self.prompt_move())
            else:
                self._computer_move()

            self.game_state.print_board()
            self.win_checker.update_game_state(self.game_state)

        outcome = self.game_state.outcome
        if outcome == Outcome.COMPUTER_WIN:
            self.boxed(" Computer (O) wins!")
        elif outcome == Outcome.HUMAN_WIN:
            self.boxed(" You (X) win! Congrats!")
        else:
            self.boxed(" It's a draw!")

        return outcome

    def _computer_move(self):
        """Let the AI pick and play its move."""
        self.boxed(" Computer is thinking...")

        move = self.ai.choose_move(self.game_state.board)
        if move is None:
            print("ERROR: AI could not find a move!")
            return

        self.game_state.make_move(move)
        print(f" Computer chose position {move + self.config.FIRST_POSITION}.")

    def run(self, mode: Optional[int] = None, human_first: Optional[bool] = None) -> Optional[Outcome]:
        """
        Play one session.

        Args:
            mode: TWO_PLAYERS or VS_COMPUTER. None means ask.
            human_first: Only used against the computer. None means ask.

        Returns:
            How the game ended, or None if no game was played.
        """
        self.show_title()

        if mode is None:
            mode = self.choose_mode()
            if mode is None:
                return None

        if mode == TWO_PLAYERS:
            return self.two_player_game()
        return self.human_vs_computer(human_first)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe")
    parser.add_argument(
        "--mode",
        type=int,
        choices=[TWO_PLAYERS, VS_COMPUTER],
        help="1 = two players, 2 = play vs computer (asks if not given)"
    )
    first = parser.add_mutually_exclusive_group()
    first.add_argument(
        "--human-first",
        dest="human_first",
        action="store_const",
        const=True,
        help="Against the computer, you move first"
    )
    first.add_argument(
        "--computer-first",
        dest="human_first",
        action="store_const",
        const=False,
        help="Against the computer, the computer moves first"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.DEBUG_MODE = args.debug

    console = TicTacToeConsole(config)

    try:
        console.run(mode=args.mode, human_first=args.human_first)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
