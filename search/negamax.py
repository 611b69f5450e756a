"""
Negamax game-tree search with alpha-beta pruning.

Every ply uses the same code path: a position's score is always from the
point of view of the side to move, and a child's score is negated on the
way back up.
"""

from dataclasses import dataclass
from typing import Optional

from board import BoardState, Move

from .config import SearchConfig


@dataclass(frozen=True)
class SearchResult:
    """Best score found for the side to move, and the move that gets it."""
    score: int
    move: Optional[Move] = None


@dataclass
class SearchStats:
    """Counters filled in by a search. Pass one in to see how hard it worked."""
    nodes: int = 0          # Positions visited
    cutoffs: int = 0        # Times the remaining siblings were pruned


def negamax(
    state: BoardState,
    depth_remaining: int,
    alpha: float = float('-inf'),
    beta: float = float('inf'),
    stats: Optional[SearchStats] = None
) -> SearchResult:
    """
    Depth-limited negamax with alpha-beta pruning.

    Args:
        state: Position to search. Not modified.
        depth_remaining: How many more plies to search.
        alpha: Lower bound of the window.
        beta: Upper bound of the window.
        stats: Optional counters to update.

    Returns:
        SearchResult for the side to move. The move is None when the state
        is terminal or the depth is used up. Among equal scores the first
        move in row-major order is kept.
    """
    if stats is not None:
        stats.nodes += 1

    if state.is_terminal() or depth_remaining == 0:
        return SearchResult(state.evaluate(depth_remaining), None)

    best_score = float('-inf')
    best = None

    for move in state.legal_moves():
        child = state.apply_move(move)

        reply = negamax(child, depth_remaining - 1, -beta, -max(alpha, best_score), stats)
        score = -reply.score

        if score > best_score:
            best_score = score
            best = move

            if best_score >= beta:
                if stats is not None:
                    stats.cutoffs += 1
                return SearchResult(best_score, best)  # Prune

    return SearchResult(best_score, best)


def best_move(
    state: BoardState,
    max_depth: int = SearchConfig.MAX_DEPTH,
    stats: Optional[SearchStats] = None
) -> SearchResult:
    """
    Find the best move for the side to move.

    Args:
        state: Current position.
        max_depth: Plies to look ahead.
        stats: Optional counters to update.

    Returns:
        SearchResult with a legal move, or with move None if the game is
        already over (the score is then the terminal evaluation).
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    return negamax(state, max_depth, float('-inf'), float('inf'), stats)
