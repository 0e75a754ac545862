"""
Search Module

This module implements the move search: depth-limited minimax with
alpha-beta pruning over a single shared board.

Key Components:
    - alpha_beta: Core recursive search
    - search: Root search returning move, score and node count
    - select_best_move: Root search returning just the move
"""

from materialist.search.minimax import SearchResult, alpha_beta, search, select_best_move

__all__ = ['SearchResult', 'alpha_beta', 'search', 'select_best_move']
