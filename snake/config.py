"""
Snake configuration.
Grid size, starting snake, scoring, and the characters used in a grid snapshot.
"""


class SnakeConfig:
    """
    Configuration class for Snake settings.
    Change these values based on your terminal size!
    """

    # ==================== GRID SETTINGS ====================
    WIDTH = 30
    HEIGHT = 20

    # Leaving one edge comes back in on the opposite edge
    WRAP_AROUND = True

    # ==================== SNAKE SETTINGS ====================
    INITIAL_LENGTH = 3
    FOOD_SCORE = 10

    # ==================== GRID CHARACTERS ====================
    SNAKE_CHAR = "O"
    FOOD_CHAR = "*"
    EMPTY_CHAR = " "

    # ==================== CONTROLS ====================
    KEY_UP = "w"
    KEY_DOWN = "s"
    KEY_LEFT = "a"
    KEY_RIGHT = "d"
    KEY_QUIT = "q"

    # Terminal arrow keys arrive as ESC [ A/B/C/D
    ARROW_UP = "\x1b[A"
    ARROW_DOWN = "\x1b[B"
    ARROW_RIGHT = "\x1b[C"
    ARROW_LEFT = "\x1b[D"

    # ==================== PLAYER ====================
    DEFAULT_PLAYER_NAME = "Player"
