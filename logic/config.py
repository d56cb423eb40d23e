"""
Game configuration for TicTacToe.
All the settings for the board, the computer opponent, and the console.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to adjust the console wording or logging!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, indexed 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    MIN_POSITION = 0
    MAX_POSITION = CELL_COUNT - 1  # 8

    # Display tokens for each marker
    EMPTY_TOKEN = "-"
    X_TOKEN = "x"
    O_TOKEN = "o"

    # ==================== AI SETTINGS ====================
    # Cells the AI falls back to when it can neither win nor block:
    # center first, then corners, then edges
    INDEX_PRIORITIES = (4, 0, 2, 6, 8, 1, 3, 5, 7)

    # ==================== CONSOLE SETTINGS ====================
    # Launch modes accepted by main.py
    MODE_PVP = "pvp"
    MODE_AI = ("ki", "ai")

    INPUT_REQUEST_FORMAT = "{move}. move: {player}"
    WINNER_FORMAT = "Winner: {player}"
    NO_WINNER_TEXT = "No winner"

    # ==================== DEBUG SETTINGS ====================
    LOG_LEVEL = "WARNING"
