"""
Tic-Tac-Toe logic.
Handles game state, rules, and the minimax AI opponent.
"""

from .config import GameConfig
from .game_state import Board, Cell, GameState, Move, Outcome, new_board, parse_board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, check_win, evaluate, moves_left
from .ai_player import AIPlayer, find_best_move, minimax
