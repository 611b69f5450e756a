"""
Errors raised by the board.
"""


class BoardError(Exception):
    """Base class for board errors."""


class InvalidMove(BoardError):
    """A move targets a cell off the board or one that is already taken."""

    def __init__(self, row: int, col: int, reason: str):
        super().__init__(f"Invalid move ({row}, {col}): {reason}")
        self.row = row
        self.col = col
        self.reason = reason


class InvariantViolation(BoardError):
    """A board state is malformed (wrong shape, bad cell value, bad turn)."""
