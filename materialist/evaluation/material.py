"""
Material Evaluation

Scores a position by counting material only: no piece-square tables, no
mobility, no king safety. Kings are worth nothing since both sides always
have exactly one.

Material Values (centipawns):
    P=100, N=320, B=330, R=500, Q=900, K=0
"""

from typing import Optional

import chess

from materialist.evaluation.base import Evaluator


PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}


def piece_value(piece_type: Optional[chess.PieceType]) -> int:
    """
    Value of one piece of the given type, identical for both colors.

    Args:
        piece_type: chess.PAWN, chess.KNIGHT, etc. None stands for an
                    empty square.

    Returns:
        Piece value in centipawns (0 for kings and empty squares)
    """
    if piece_type is None:
        return 0
    return PIECE_VALUES.get(piece_type, 0)


def material(board: chess.Board, color: chess.Color) -> int:
    """Sum of piece values over every piece `color` has on the board."""
    return sum(
        piece_value(piece_type) * len(board.pieces(piece_type, color))
        for piece_type in chess.PIECE_TYPES
    )


def evaluate(board: chess.Board) -> int:
    """White material minus Black material."""
    return material(board, chess.WHITE) - material(board, chess.BLACK)


class MaterialEvaluator(Evaluator):
    """
    Evaluator that only counts material.

    This is the default scoring strategy of the engine.
    """

    def evaluate(self, board: chess.Board) -> int:
        return evaluate(board)

    def material(self, board: chess.Board, color: chess.Color) -> int:
        return material(board, color)
