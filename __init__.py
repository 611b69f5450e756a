"""
TicTacToe Negamax Project
=========================
Play TicTacToe against a computer opponent that searches the game tree
with negamax and alpha-beta pruning.

Packages: board (state and rules) -> search (AI) -> main.py (console).
"""

__version__ = "1.0.0"
