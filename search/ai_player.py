"""
AI player for the TicTacToe engine.
Uses negamax with alpha-beta pruning to choose the best move.
"""

from typing import Optional

from board import BoardState, Cell, Move

from .config import SearchConfig
from .negamax import SearchResult, SearchStats, best_move


class AIPlayer:
    """
    An AI that plays TicTacToe using negamax search.

    With the full search depth the AI plays perfectly - it wins if possible,
    blocks the opponent if needed, and never loses (at worst, draw).
    """

    def __init__(self, player: Cell = Cell.COMPUTER, max_depth: int = SearchConfig.MAX_DEPTH):
        """
        Initialize the AI player.

        Args:
            player: Which side the AI controls (default: COMPUTER)
            max_depth: Plies to look ahead
        """
        if player == Cell.EMPTY:
            raise ValueError("AI must play HUMAN or COMPUTER")

        self.player = Cell(player)
        self.max_depth = max_depth

        # Result of the last search (for debugging)
        self.last_result: Optional[SearchResult] = None
        self.last_stats = SearchStats()

    def get_best_move(self, board_state: BoardState) -> Optional[Move]:
        """
        Get the best move for the current position.

        Args:
            board_state: Current board state.

        Returns:
            Move to play, or None if it isn't our turn or the game is over.
        """
        # Check if it's our turn
        if board_state.turn != self.player:
            print(f"Warning: It's not {self.player.name}'s turn!")
            return None

        if board_state.is_terminal():
            return None

        self.last_stats = SearchStats()
        self.last_result = best_move(board_state, self.max_depth, self.last_stats)

        if SearchConfig.DEBUG_MODE:
            print(
                f"AI evaluated {self.last_stats.nodes} positions "
                f"({self.last_stats.cutoffs} cutoffs). "
                f"Best move: {self.last_result.move} (score: {self.last_result.score})"
            )

        return self.last_result.move

    def get_move_suggestion(self, board_state: BoardState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board_state: Current board state.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board_state)

        if move is None:
            return "No moves available!"

        return f"Place {self.player.symbol} at position ({move.row}, {move.col})"
