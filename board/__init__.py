"""
Board module for the TicTacToe engine.
Handles board state, line ownership, win detection and move validation.
"""

from .config import BoardConfig
from .errors import BoardError, InvalidMove, InvariantViolation
from .board_state import BoardState, Cell, Move, Outcome
from .win_checker import WinChecker, LineSummary
from .move_validator import MoveValidator, ValidationResult
