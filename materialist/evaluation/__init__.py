"""
Evaluation Module

This module provides position evaluation for the chess engine.
Evaluators are SWAPPABLE: the search works with any object implementing
the Evaluator interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material balance (default)
    - SCORE_MIN / SCORE_MAX: Search window sentinels

Data Flow:
    chess.Board → evaluator.evaluate() → int (centipawns)
                                         Positive = White advantage
                                         Negative = Black advantage
"""

from materialist.evaluation.base import SCORE_MAX, SCORE_MIN, Evaluator
from materialist.evaluation.material import (
    PIECE_VALUES,
    MaterialEvaluator,
    evaluate,
    material,
    piece_value,
)

__all__ = [
    'Evaluator',
    'MaterialEvaluator',
    'PIECE_VALUES',
    'SCORE_MAX',
    'SCORE_MIN',
    'evaluate',
    'material',
    'piece_value',
]
