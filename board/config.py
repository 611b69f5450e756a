"""
Board configuration for the TicTacToe engine.
Cell encoding, evaluation weights and debug switches.
"""


class BoardConfig:
    """
    Configuration class for board settings.
    The board size is fixed, the rest can be tuned.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE

    # Signed cell values, so line sums and owners are plain arithmetic
    HUMAN = -1
    EMPTY = 0
    COMPUTER = 1

    # Text used when printing the board
    SYMBOLS = {HUMAN: "X", EMPTY: " ", COMPUTER: "O"}

    # ==================== EVALUATION WEIGHTS ====================
    # Terminal score is WIN_SCORE * (depth remaining + 1)
    WIN_SCORE = 100

    # Side to move holds an open two (the other side failed to block)
    THREAT_SCORE = 90

    # ==================== DEBUG SETTINGS ====================
    # Validate shape, cell domain and mark counts on every new state
    CHECK_INVARIANTS = True
