"""
Search configuration for the TicTacToe engine.
"""


class SearchConfig:
    """
    Configuration class for the game-tree search.
    Change these values to make the AI weaker or chattier.
    """

    # ==================== SEARCH SETTINGS ====================
    # Plies to look ahead. 8 covers every game the computer can face
    # when the human moves first.
    MAX_DEPTH = 8

    # ==================== DEBUG SETTINGS ====================
    # Print positions evaluated and the chosen move after every search
    DEBUG_MODE = False
