"""
Tests for the board package: state, line summaries, evaluation, validation.
Run with pytest, or directly as a script.
"""

import sys

import numpy as np
import pytest

from board import (
    BoardConfig,
    BoardState,
    Cell,
    InvalidMove,
    InvariantViolation,
    Move,
    MoveValidator,
    Outcome,
    WinChecker,
)

H, E, C = Cell.HUMAN, Cell.EMPTY, Cell.COMPUTER


# ==================== CONSTRUCTION ====================

def test_new_board_is_empty():
    board = BoardState.new()
    assert board.grid.shape == (3, 3)
    assert board.move_count == 0
    assert board.turn == Cell.HUMAN
    assert board.winner is None
    assert len(board.legal_moves()) == 9


def test_new_board_computer_first():
    assert BoardState.new(Cell.COMPUTER).turn == Cell.COMPUTER


def test_wrong_shape_is_invariant_violation():
    with pytest.raises(InvariantViolation):
        BoardState(grid=np.zeros((3, 4)), turn=Cell.HUMAN)
    with pytest.raises(InvariantViolation):
        BoardState(grid=np.zeros(9), turn=Cell.HUMAN)


def test_bad_cell_value_is_invariant_violation():
    with pytest.raises(InvariantViolation):
        BoardState.from_rows([[2, 0, 0], [0, 0, 0], [0, 0, 0]], Cell.HUMAN)


def test_bad_turn_is_invariant_violation():
    with pytest.raises(InvariantViolation):
        BoardState.new(Cell.EMPTY)
    with pytest.raises(InvariantViolation):
        BoardState(turn=5)


def test_uneven_mark_counts_are_invariant_violation():
    with pytest.raises(InvariantViolation):
        BoardState.from_rows([[H, H, 0], [0, 0, 0], [0, 0, 0]], Cell.COMPUTER)


# ==================== MOVES ====================

def test_legal_moves_row_major():
    board = BoardState.from_rows([[0, C, 0], [H, 0, 0], [0, 0, 0]], Cell.HUMAN)
    assert board.legal_moves() == [
        Move(0, 0), Move(0, 2),
        Move(1, 1), Move(1, 2),
        Move(2, 0), Move(2, 1), Move(2, 2),
    ]


def test_legal_moves_are_plain_ints():
    move = BoardState.new().legal_moves()[0]
    assert type(move.row) is int and type(move.col) is int


def test_apply_move_returns_new_state():
    board = BoardState.new()
    child = board.apply_move(Move(1, 1))

    assert child is not board
    assert board.grid[1, 1] == E
    assert board.move_count == 0
    assert child.grid[1, 1] == H
    assert child.turn == Cell.COMPUTER


def test_turn_alternates():
    board = BoardState.new()
    for move in [Move(0, 0), Move(1, 1), Move(2, 2), Move(0, 2)]:
        child = board.apply_move(move)
        assert child.turn == board.turn.opposite()
        assert child.grid[move.row, move.col] == board.turn
        board = child


def test_legal_move_closure():
    board = BoardState.from_rows([[H, 0, C], [0, H, 0], [0, 0, C]], Cell.HUMAN)
    occupied = board.move_count

    for move in board.legal_moves():
        assert board.grid[move.row, move.col] == E
        child = board.apply_move(move)
        assert child.grid[move.row, move.col] != E
        assert child.move_count == occupied + 1
        assert move not in child.legal_moves()


def test_apply_move_occupied_raises():
    board = BoardState.new().apply_move(Move(0, 0))
    with pytest.raises(InvalidMove) as info:
        board.apply_move(Move(0, 0))
    assert (info.value.row, info.value.col) == (0, 0)
    assert "occupied" in str(info.value)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 3), (3, 3), (1, -2)])
def test_apply_move_off_board_raises(row, col):
    with pytest.raises(InvalidMove):
        BoardState.new().apply_move(Move(row, col))


def test_commit_move_changes_in_place():
    board = BoardState.new()
    board.commit_move(Move(2, 1))
    assert board.grid[2, 1] == H
    assert board.turn == Cell.COMPUTER

    with pytest.raises(InvalidMove):
        board.commit_move(Move(2, 1))
    assert board.turn == Cell.COMPUTER


def test_copy_is_independent():
    board = BoardState.new()
    twin = board.copy()
    twin.commit_move(Move(0, 0))
    assert board.move_count == 0
    assert twin != board


# ==================== TERMINAL STATES ====================

@pytest.mark.parametrize("rows, turn, winner", [
    # Row
    ([[H, H, H], [C, C, 0], [0, 0, 0]], Cell.COMPUTER, Outcome.HUMAN),
    # Column
    ([[C, H, 0], [C, H, 0], [C, 0, 0]], Cell.HUMAN, Outcome.COMPUTER),
    # Main diagonal
    ([[H, C, 0], [C, H, 0], [0, 0, H]], Cell.COMPUTER, Outcome.HUMAN),
    # Anti-diagonal
    ([[C, H, C], [H, C, 0], [C, 0, H]], Cell.HUMAN, Outcome.COMPUTER),
])
def test_three_in_a_line_wins(rows, turn, winner):
    board = BoardState.from_rows(rows, turn)
    assert board.is_terminal()
    assert board.winner == winner


def test_full_board_without_line_is_draw():
    board = BoardState.from_rows([[H, C, H], [H, C, C], [C, H, H]], Cell.COMPUTER)
    assert board.is_terminal()
    assert board.winner == Outcome.DRAW
    assert board.legal_moves() == []


def test_win_beats_draw_on_full_board():
    board = BoardState.from_rows([[H, H, H], [C, C, H], [C, H, C]], Cell.COMPUTER)
    assert board.is_terminal()
    assert board.winner == Outcome.HUMAN


def test_open_board_is_not_terminal():
    board = BoardState.from_rows([[H, C, 0], [0, H, 0], [0, 0, C]], Cell.HUMAN)
    assert not board.is_terminal()
    assert board.winner is None


def test_winner_is_cleared_after_commit():
    board = BoardState.from_rows([[H, H, 0], [C, C, 0], [0, 0, 0]], Cell.HUMAN)
    assert not board.is_terminal()
    board.commit_move(Move(0, 2))
    assert board.winner is None
    assert board.is_terminal()
    assert board.winner == Outcome.HUMAN


# ==================== LINE SUMMARY ====================

def test_line_sums_and_owners():
    board = BoardState.from_rows([[C, 0, 0], [0, H, 0], [0, 0, 0]], Cell.HUMAN)
    board.is_terminal()

    # rows, columns, main diagonal, anti-diagonal
    assert board.summary.sums.tolist() == [1, -1, 0, 1, -1, 0, 0, -1]
    assert board.summary.owners.tolist() == [1, -1, 0, 1, -1, 0, 0, -1]
    assert board.summary.row_sums.tolist() == [1, -1, 0]
    assert board.summary.col_sums.tolist() == [1, -1, 0]
    assert board.summary.diag_sums.tolist() == [0, -1]
    assert board.summary.ownership_count(BoardConfig.COMPUTER) == 2
    assert board.summary.ownership_count(BoardConfig.HUMAN) == 3


def test_line_sum_three_only_when_full_and_owned():
    board = BoardState.from_rows([[C, C, C], [H, H, 0], [0, 0, 0]], Cell.HUMAN)
    board.is_terminal()
    summary = board.summary
    for line_sum, owner, cells in zip(summary.sums, summary.owners, WinChecker().lines(board.grid)):
        if abs(line_sum) == 3:
            assert owner == np.sign(line_sum)
            assert (cells != 0).all()


def test_winning_line():
    checker = WinChecker()
    board = BoardState.from_rows([[C, H, 0], [C, H, 0], [C, 0, 0]], Cell.HUMAN)
    assert checker.get_winning_line(board.grid) == [(0, 0), (1, 0), (2, 0)]
    assert checker.get_winning_line(BoardState.new().grid) is None


# ==================== EVALUATION ====================

HUMAN_WON = [[H, H, H], [C, C, 0], [C, 0, 0]]
COMPUTER_WON = [[C, C, C], [H, H, 0], [H, 0, 0]]


@pytest.mark.parametrize("rows, turn, depth, expected", [
    # Human to move, human won
    (HUMAN_WON, Cell.HUMAN, 0, 100),
    # Human to move, computer won
    (COMPUTER_WON, Cell.HUMAN, 0, -100),
    # Computer to move, human won
    (HUMAN_WON, Cell.COMPUTER, 0, -100),
    # Computer to move, computer won
    (COMPUTER_WON, Cell.COMPUTER, 0, 100),
    # Sooner results weigh more
    (COMPUTER_WON, Cell.HUMAN, 3, -400),
    (COMPUTER_WON, Cell.COMPUTER, 7, 800),
])
def test_terminal_scores(rows, turn, depth, expected):
    assert BoardState.from_rows(rows, turn).evaluate(depth) == expected


def test_draw_scores_zero():
    board = BoardState.from_rows([[H, C, H], [H, C, C], [C, H, H]], Cell.COMPUTER)
    assert board.evaluate(0) == 0
    assert board.evaluate(5) == 0


def test_threat_for_human_to_move():
    # Computer did not block the top row
    board = BoardState.from_rows([[H, H, 0], [0, C, 0], [C, 0, 0]], Cell.HUMAN)
    assert board.evaluate(0) == BoardConfig.THREAT_SCORE
    assert board.absolute_score(0) == -BoardConfig.THREAT_SCORE


def test_threat_for_computer_to_move():
    # Human did not block the top row
    board = BoardState.from_rows([[C, C, 0], [H, 0, 0], [0, 0, H]], Cell.COMPUTER)
    assert board.evaluate(0) == BoardConfig.THREAT_SCORE
    assert board.absolute_score(0) == BoardConfig.THREAT_SCORE


def test_opponent_open_two_is_not_a_threat_score():
    # Only the side to move's own open two counts
    board = BoardState.from_rows([[C, C, 0], [H, 0, 0], [0, 0, H]], Cell.HUMAN)
    assert board.evaluate(0) != BoardConfig.THREAT_SCORE
    assert board.evaluate(0) == 1


def test_ownership_score():
    board = BoardState.from_rows([[C, 0, 0], [0, H, 0], [0, 0, 0]], Cell.HUMAN)
    assert board.evaluate(0) == 1
    assert board.copy().evaluate(4) == 1

    board.turn = Cell.COMPUTER
    assert board.evaluate(0) == -1


def test_empty_board_scores_zero():
    assert BoardState.new().evaluate(8) == 0


SYMMETRY_BOARDS = [
    ([[C, 0, 0], [0, H, 0], [0, 0, 0]], Cell.HUMAN),
    ([[H, H, 0], [0, C, 0], [C, 0, 0]], Cell.HUMAN),
    ([[C, C, 0], [H, 0, 0], [0, 0, H]], Cell.COMPUTER),
    (HUMAN_WON, Cell.COMPUTER),
    (COMPUTER_WON, Cell.HUMAN),
    ([[H, C, H], [H, C, C], [C, H, H]], Cell.COMPUTER),
]


@pytest.mark.parametrize("rows, turn", SYMMETRY_BOARDS)
def test_mirrored_state_scores(rows, turn):
    board = BoardState.from_rows(rows, turn)
    mirror = board.mirrored()

    assert mirror.turn == board.turn.opposite()
    assert (mirror.grid == -board.grid).all()
    for depth in (0, 3):
        # Same position from the other side's chair
        assert mirror.evaluate(depth) == board.evaluate(depth)
        # From the computer's fixed chair the score flips
        assert mirror.absolute_score(depth) == -board.absolute_score(depth)


# ==================== VALIDATOR ====================

def test_validator():
    validator = MoveValidator()
    board = BoardState.new()
    assert validator.validate_move(board, 1, 1).is_valid

    board.commit_move(Move(1, 1))
    result = validator.validate_move(board, 1, 1)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_move(board, 5, 5)
    assert not result.is_valid
    assert "Must be 0-2" in result.error_message

    assert not validator.validate_move(board, "a", 1).is_valid


def test_validator_rejects_moves_after_game_over():
    board = BoardState.from_rows(COMPUTER_WON, Cell.HUMAN)
    result = MoveValidator().validate_move(board, 2, 2)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"


# ==================== DISPLAY ====================

def test_str():
    board = BoardState.from_rows([[H, 0, 0], [0, C, 0], [0, 0, 0]], Cell.HUMAN)
    text = str(board)
    assert "0 X |   |  " in text
    assert "1   | O |  " in text


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
