"""
Configuration for the Tic-Tac-Toe console game.
All the settings for marks, scoring, and console output.
"""


class GameConfig:
    """
    Configuration class for Tic-Tac-Toe settings.
    Change these values to tweak the game!
    """

    # ==================== BOARD SETTINGS ====================
    # Tic-Tac-Toe is a 3x3 grid, cells numbered 0-8 in row-major order
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # Marks shown on the board
    HUMAN_MARK = "X"
    COMPUTER_MARK = "O"
    EMPTY_MARK = " "

    # ==================== AI SETTINGS ====================
    # Score of a finished game for the computer (+) or the human (-)
    WIN_SCORE = 10

    # ==================== CONSOLE SETTINGS ====================
    LINE_CHAR = "#"
    LINE_WIDTH = 44
    ROW_SEPARATOR = "---+---+---"

    # Human enters 1-9, we store 0-8
    FIRST_POSITION = 1
    LAST_POSITION = NUM_CELLS

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
