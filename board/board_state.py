"""
Board state for the TicTacToe engine.
Tracks the 3x3 grid, whose turn it is, and the game result.
"""

from enum import IntEnum
from typing import ClassVar, List, Optional, Sequence
from dataclasses import dataclass, field

import numpy as np

from .config import BoardConfig
from .errors import InvalidMove, InvariantViolation
from .move_validator import MoveValidator
from .win_checker import LineSummary, WinChecker


class Cell(IntEnum):
    """What can be in a cell. The two sides double as turn markers."""
    HUMAN = BoardConfig.HUMAN
    EMPTY = BoardConfig.EMPTY
    COMPUTER = BoardConfig.COMPUTER

    def opposite(self) -> "Cell":
        """Get the opposite side."""
        return Cell(-self.value)

    @property
    def symbol(self) -> str:
        return BoardConfig.SYMBOLS[self.value]


class Outcome(IntEnum):
    """Result of a finished game. Signed like Cell so it can be multiplied."""
    HUMAN = BoardConfig.HUMAN
    DRAW = 0
    COMPUTER = BoardConfig.COMPUTER


@dataclass(frozen=True)
class Move:
    """
    A move in the game: the cell being claimed.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)


@dataclass(eq=False)
class BoardState:
    """
    One configuration of the TicTacToe board.

    Tracks:
    - The 3x3 grid (-1 human, 0 empty, 1 computer)
    - Whose turn it is
    - The winner, once is_terminal() has found the game over

    States made by apply_move() are never modified afterwards. Only the live
    board owned by a game session changes, through commit_move().
    """

    # The 3x3 grid of signed cell values
    grid: np.ndarray = field(
        default_factory=lambda: np.zeros(
            (BoardConfig.BOARD_SIZE, BoardConfig.BOARD_SIZE), dtype=np.int8
        )
    )

    # Side to move next
    turn: Cell = Cell.HUMAN

    # Filled in by is_terminal()
    winner: Optional[Outcome] = field(default=None, init=False)
    summary: Optional[LineSummary] = field(default=None, init=False, repr=False)

    win_checker: ClassVar[WinChecker] = WinChecker()
    validator: ClassVar[MoveValidator] = MoveValidator()

    def __post_init__(self):
        grid = np.asarray(self.grid)
        if BoardConfig.CHECK_INVARIANTS:
            self._check_grid(grid)
        self.grid = grid.astype(np.int8)

        try:
            self.turn = Cell(self.turn)
        except ValueError:
            raise InvariantViolation(f"Turn must be HUMAN or COMPUTER, got {self.turn!r}") from None

        if BoardConfig.CHECK_INVARIANTS:
            self._check_invariants()

    # ==================== CONSTRUCTION ====================

    @classmethod
    def new(cls, turn: Cell = Cell.HUMAN) -> "BoardState":
        """Create an empty board. The human moves first unless told otherwise."""
        return cls(turn=turn)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], turn: Cell) -> "BoardState":
        """
        Create a board from nested lists of cell values.

        Args:
            rows: 3 rows of 3 values, each -1, 0 or 1 (or Cell members).
            turn: Side to move next.

        Returns:
            The new BoardState.
        """
        return cls(grid=np.array(rows, dtype=np.int64), turn=turn)

    # ==================== QUERIES ====================

    def legal_moves(self) -> List[Move]:
        """
        Get all empty cells on the board, row by row.

        Returns:
            List of Move, in row-major order.
        """
        return [Move(int(row), int(col)) for row, col in np.argwhere(self.grid == Cell.EMPTY)]

    def count(self, side: Cell) -> int:
        """Number of cells holding the given value."""
        return int(np.count_nonzero(self.grid == side))

    @property
    def move_count(self) -> int:
        """Number of moves made so far."""
        return int(np.count_nonzero(self.grid))

    def is_terminal(self) -> bool:
        """
        Check if the game is over, and record why.

        Recomputes the line sums and owners every call and stores them in
        `summary`, since evaluate() needs them too. A completed line wins
        even if the board is also full.

        Returns:
            True if someone has won or the board is full.
        """
        self.summary = self.win_checker.summarize(self.grid)

        winner = self.win_checker.check_winner(self.summary)
        if winner is not None:
            self.winner = Outcome(winner)
            return True

        if self.win_checker.check_draw(self.grid, self.summary):
            self.winner = Outcome.DRAW
            return True

        self.winner = None
        return False

    def evaluate(self, depth_remaining: int) -> int:
        """
        Score the board for the side to move (negamax convention).

        SCORES:
          win/loss:  +/- WIN_SCORE * (depth_remaining + 1), draw 0
          threat:    THREAT_SCORE when the side to move has an open two
          other:     lines owned by the side to move minus lines owned
                     by the other side (-8..8)

        Args:
            depth_remaining: Plies left in the search. Larger means the
                result happens sooner, so wins are worth more and losses
                cost more.

        Returns:
            The score, positive when good for the side to move.
        """
        turn = int(self.turn)

        if self.is_terminal():
            # turn    winner    outcome
            #  -1       1        -100
            #  -1      -1         100
            #   1       1         100
            #   1      -1        -100
            return BoardConfig.WIN_SCORE * turn * int(self.winner) * (depth_remaining + 1)

        # The side that just moved left a line with two of ours and a gap
        if (self.summary.sums == 2 * turn).any():
            return BoardConfig.THREAT_SCORE

        return self.summary.ownership_count(turn) - self.summary.ownership_count(-turn)

    def absolute_score(self, depth_remaining: int) -> int:
        """evaluate() from the computer's fixed point of view."""
        return self.evaluate(depth_remaining) * int(self.turn)

    # ==================== TRANSFORMATIONS ====================

    def apply_move(self, move: Move) -> "BoardState":
        """
        Make a move on a copy of the board.

        Args:
            move: An empty cell, normally taken from legal_moves().

        Returns:
            A new BoardState with the cell set to the current side and the
            turn passed to the other side. This state is not changed.

        Raises:
            InvalidMove: If the cell is off the board or already taken.
        """
        self._validate(move)

        grid = self.grid.copy()
        grid[move.row, move.col] = int(self.turn)
        return BoardState(grid=grid, turn=self.turn.opposite())

    def commit_move(self, move: Move) -> None:
        """
        Make a move on this board in place. Only for a session's live board.

        Raises:
            InvalidMove: If the cell is off the board or already taken.
        """
        self._validate(move)

        self.grid[move.row, move.col] = int(self.turn)
        self.turn = self.turn.opposite()
        self.winner = None
        self.summary = None

        if BoardConfig.CHECK_INVARIANTS:
            self._check_grid(self.grid)
            self._check_invariants()

    def mirrored(self) -> "BoardState":
        """Swap every human mark with a computer mark and flip the turn."""
        return BoardState(grid=-self.grid, turn=self.turn.opposite())

    def copy(self) -> "BoardState":
        """Create an independent copy of the board."""
        return BoardState(grid=self.grid.copy(), turn=self.turn)

    # ==================== CHECKS ====================

    def _validate(self, move: Move) -> None:
        result = self.validator.validate_cell(self.grid, move.row, move.col)
        if not result.is_valid:
            raise InvalidMove(move.row, move.col, result.error_message)

    @staticmethod
    def _check_grid(grid: np.ndarray) -> None:
        size = BoardConfig.BOARD_SIZE
        if grid.shape != (size, size):
            raise InvariantViolation(f"Board must be {size}x{size}, got shape {grid.shape}")
        if not np.isin(grid, (BoardConfig.HUMAN, BoardConfig.EMPTY, BoardConfig.COMPUTER)).all():
            raise InvariantViolation(f"Cells must be -1, 0 or 1, got {np.unique(grid).tolist()}")

    def _check_invariants(self) -> None:
        if self.turn == Cell.EMPTY:
            raise InvariantViolation("Turn must be HUMAN or COMPUTER, got EMPTY")

        humans = self.count(Cell.HUMAN)
        computers = self.count(Cell.COMPUTER)
        if abs(humans - computers) > 1:
            raise InvariantViolation(
                f"Sides must alternate: {humans} human marks vs {computers} computer marks"
            )

    # ==================== DISPLAY ====================

    def __eq__(self, other):
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.turn == other.turn and np.array_equal(self.grid, other.grid)

    def __str__(self) -> str:
        lines = ["  0   1   2"]
        for row in range(BoardConfig.BOARD_SIZE):
            cells = " | ".join(BoardConfig.SYMBOLS[int(value)] for value in self.grid[row])
            lines.append(f"{row} {cells}")
            if row < BoardConfig.BOARD_SIZE - 1:
                lines.append("  --+---+--")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self)

        # Print game info
        if self.is_terminal():
            if self.winner == Outcome.DRAW:
                print("\nIt's a DRAW!")
            else:
                print(f"\n{self.winner.name} WINS!")
        else:
            print(f"\nCurrent turn: {self.turn.name} ({self.turn.symbol})")
