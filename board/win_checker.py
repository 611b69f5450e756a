"""
Win checker for the TicTacToe engine.
Sums and owners of every line, and the winner if there is one.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .config import BoardConfig


@dataclass
class LineSummary:
    """
    Derived statistics for the 8 lines of a board.

    Both arrays follow WinChecker.WINNING_LINES order:
    rows 0-2, columns 0-2, main diagonal, anti-diagonal.
    """
    sums: np.ndarray        # Arithmetic total of the three cells (-3..3)
    owners: np.ndarray      # -1/1 if only that side has marks there, else 0

    @property
    def row_sums(self) -> np.ndarray:
        return self.sums[0:3]

    @property
    def col_sums(self) -> np.ndarray:
        return self.sums[3:6]

    @property
    def diag_sums(self) -> np.ndarray:
        return self.sums[6:8]

    def ownership_count(self, side: int) -> int:
        """Number of lines owned by a side (full or partial)."""
        return int(np.count_nonzero(self.owners == side))


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same side in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    # Same lines as flat indices into grid.ravel(), shape (8, 3)
    LINE_INDEX = np.array(
        [[row * BoardConfig.BOARD_SIZE + col for row, col in line] for line in WINNING_LINES]
    )

    def lines(self, grid: np.ndarray) -> np.ndarray:
        """Cell values of every line, shape (8, 3)."""
        return grid.ravel()[self.LINE_INDEX]

    def summarize(self, grid: np.ndarray) -> LineSummary:
        """
        Compute the sum and owner of every line.

        Args:
            grid: 3x3 matrix of cell values.

        Returns:
            LineSummary for the grid.
        """
        lines = self.lines(grid).astype(np.int64)
        sums = lines.sum(axis=1)

        # +1 if only COMPUTER marks, -1 if only HUMAN marks, 0 if mixed or empty
        has_computer = (lines == BoardConfig.COMPUTER).any(axis=1)
        has_human = (lines == BoardConfig.HUMAN).any(axis=1)
        owners = has_computer.astype(np.int64) - has_human.astype(np.int64)

        return LineSummary(sums=sums, owners=owners)

    def check_winner(self, summary: LineSummary) -> Optional[int]:
        """
        Check if there's a winner.

        Args:
            summary: Line summary of the board.

        Returns:
            The winning cell value (HUMAN or COMPUTER), or None if no winner yet.
        """
        for line_sum in summary.sums:
            if abs(line_sum) == BoardConfig.BOARD_SIZE:
                return BoardConfig.COMPUTER if line_sum > 0 else BoardConfig.HUMAN
        return None

    def check_draw(self, grid: np.ndarray, summary: LineSummary) -> bool:
        """
        Check if the game is a draw.

        A winning line takes precedence even when the board is full.
        """
        if self.check_winner(summary) is not None:
            return False
        return not (grid == BoardConfig.EMPTY).any()

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            grid: 3x3 matrix of cell values.

        Returns:
            The winning line as list of (row, col), or None.
        """
        sums = self.summarize(grid).sums
        for line, line_sum in zip(self.WINNING_LINES, sums):
            if abs(line_sum) == BoardConfig.BOARD_SIZE:
                return line
        return None
