"""
Snake module.
Game model for the console Snake game.
"""

from .config import SnakeConfig
from .snake_game import Direction, Point, SnakeGame
