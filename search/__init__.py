"""
Search module for the TicTacToe engine.
Handles the negamax game-tree search and the AI opponent.
"""

from .config import SearchConfig
from .negamax import SearchResult, SearchStats, negamax, best_move
from .ai_player import AIPlayer
