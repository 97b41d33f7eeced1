"""
Game configuration for TicTacToe.
Board geometry, text shown to the players, and logging settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3; only the text is meant to be changed.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # X always opens the game
    FIRST_PLAYER = "X"

    # ==================== STATUS TEXT ====================
    WINNER_TEXT = "Winner: {mark}"
    DRAW_TEXT = "Draw! No moves left."
    NEXT_PLAYER_TEXT = "Next Player: {mark}"

    # ==================== HISTORY LABELS ====================
    # Rows and columns are shown 1-based
    START_LABEL = "Go to game start"
    MOVE_LABEL = "Go to move #{step}"
    MOVE_WITH_CELL_LABEL = "Go to move #{step} (r{row}, c{col})"

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
