"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules without raising.
"""

from typing import Optional
from dataclasses import dataclass

import numpy as np

from .config import BoardConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board (0-2)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(self, board_state, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board_state: Current BoardState.
            row: Row to place mark (0-2).
            col: Column to place mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if board_state.is_terminal():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        return self.validate_cell(board_state.grid, row, col)

    def validate_cell(self, grid, row: int, col: int) -> ValidationResult:
        """
        Validate only the target cell: on the board and empty.
        Used by BoardState itself, which does not care if the game is over.
        """
        size = BoardConfig.BOARD_SIZE

        # Check if row/col are in valid range
        if not (isinstance(row, (int, np.integer)) and isinstance(col, (int, np.integer))
                and 0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

        # Check if cell is empty
        occupant = int(grid[row, col])
        if occupant != BoardConfig.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {BoardConfig.SYMBOLS[occupant]}"
            )

        return ValidationResult(is_valid=True)
