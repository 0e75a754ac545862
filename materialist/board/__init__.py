"""
Board Engine Module

This module adapts python-chess to the small board contract the search and
the UCI layer rely on. Nothing in the engine touches chess.Board directly
except through these functions.

Key Components:
    - default_position / position_from_fen: Position construction
    - legal_moves / apply / undo: Move enumeration and reversible application
    - branch: Context manager pairing every apply with its undo
    - game_ended: Terminal-state detection
    - move_from_algebraic / move_to_algebraic: UCI move notation

Data Flow:
    "position startpos moves e2e4" → default_position() → apply() → chess.Board
"""

from materialist.board.engine import (
    BoardError,
    FenError,
    MoveNotationError,
    apply,
    branch,
    current_side,
    default_position,
    game_ended,
    legal_moves,
    move_from_algebraic,
    move_to_algebraic,
    position_from_fen,
    undo,
)

__all__ = [
    'BoardError',
    'FenError',
    'MoveNotationError',
    'apply',
    'branch',
    'current_side',
    'default_position',
    'game_ended',
    'legal_moves',
    'move_from_algebraic',
    'move_to_algebraic',
    'position_from_fen',
    'undo',
]
