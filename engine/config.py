"""
Game configuration for TicTacToe.
All the settings for the board, the computer opponent, and the UI palette.
"""

from .game_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Override attributes on a subclass or instance to change them.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

    # Mark that opens the very first round (and every round after reset_all)
    FIRST_MARK = Mark.X

    # ==================== COMPUTER OPPONENT ====================
    # Mark played by the computer when opponent mode is on
    AI_MARK = Mark.O

    # Delay before the computer plays (milliseconds)
    AI_MOVE_DELAY_MS = 500

    # Seed for the random player (None = fresh entropy)
    AI_SEED = None

    # ==================== UI SETTINGS ====================
    COLOR_PRIMARY = "#1976D2"    # X marks, title, restart button
    COLOR_ACCENT = "#FF5252"     # O marks, reset button
    COLOR_SECONDARY = "#FFFFFF"  # Background
    COLOR_GRID = "#E3E6EA"
    COLOR_TILE = "#F5F8FB"       # Occupied cell background
    COLOR_EMPTY_TEXT = "#828282"

    CELL_FONT = ("Segoe UI", 28, "bold")
    LABEL_FONT = ("Segoe UI", 12)

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
