"""
Abstract Evaluator Interface

This module defines the abstract base class for position evaluators.
The search only talks to this interface, so the scoring strategy can be
swapped without touching the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns centipawns from White's perspective
    3. Positive = White advantage, Negative = Black advantage

Score Sentinels:
    SCORE_MIN / SCORE_MAX bound every real evaluation. The search uses them
    as the initial alpha-beta window and as the starting "best" of a node.
    They are never returned as the value of a position.
"""

from abc import ABC, abstractmethod

import chess


SCORE_MAX = 2**31 - 1
SCORE_MIN = -(2**31)


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(board): Returns position evaluation in centipawns
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate a chess position from White's perspective.

        The score is absolute: it is not negated when Black is to move.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            int: Evaluation in centipawns
        """

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
