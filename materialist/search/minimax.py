"""
Minimax Search with Alpha-Beta Pruning

This module implements the core search algorithm of the engine.
Minimax explores the game tree to a fixed depth, and alpha-beta pruning
skips branches that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Shared board: Every node works on the same chess.Board, applying a
      move before recursing and undoing it afterwards (see board.branch)

Moves are searched in the order python-chess generates them. There is no
move ordering, transposition table or quiescence search, so for a given
position and depth the result is fully deterministic.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import chess

from materialist.board import branch, current_side, game_ended, legal_moves
from materialist.evaluation.base import SCORE_MAX, SCORE_MIN, Evaluator
from materialist.evaluation.material import MaterialEvaluator

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move: Best move found, None if the side to move has no legal move
        score: Evaluation after the best move (White's perspective)
        nodes: Number of positions visited below the root
        depth: Search depth used
    """
    move: Optional[chess.Move]
    score: int
    nodes: int
    depth: int


def alpha_beta(
    board: chess.Board,
    depth: int,
    alpha: int,
    beta: int,
    maximizing: bool,
    evaluator: Evaluator,
    nodes_searched: Optional[List[int]] = None,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Current chess position (mutated and restored in place)
        depth: Remaining search depth (decrements each recursive call)
        alpha: Best score the maximizer is already assured of
        beta: Best score the minimizer is already assured of
        maximizing: True if this node picks the highest child score
        evaluator: Position evaluation function
        nodes_searched: Optional mutable list [count] to track visited nodes

    Returns:
        int: Evaluation of the position in centipawns (White's perspective)

    Algorithm:
        1. Leaf (depth <= 0) or finished game → static evaluation
        2. For each legal move:
            a. Make move on board
            b. Recursively search (depth - 1, other player)
            c. Undo move
            d. Narrow alpha (maximizer) or beta (minimizer)
            e. Prune remaining siblings once alpha >= beta
        3. Return best score found
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth <= 0 or game_ended(board) is not None:
        return evaluator.evaluate(board)

    moves = legal_moves(board, current_side(board))
    if not moves:
        return evaluator.evaluate(board)

    best = SCORE_MIN if maximizing else SCORE_MAX

    for move in moves:
        with branch(board, move):
            score = alpha_beta(
                board, depth - 1, alpha, beta, not maximizing, evaluator, nodes_searched
            )

        if maximizing:
            best = max(best, score)
            alpha = max(alpha, best)
            if alpha >= beta:
                break  # Beta cutoff
        else:
            best = min(best, score)
            beta = min(beta, best)
            if beta <= alpha:
                break  # Alpha cutoff

    return best


def search(
    board: chess.Board,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> SearchResult:
    """
    Search the root position and pick the best move for the side to move.

    White looks for the highest White-relative score, Black for the lowest,
    so the child nodes start with the opponent's role. Each root move is
    searched with the full window. Ties keep the first move generated.

    Args:
        board: Current chess position, unchanged when this returns
        depth: Search depth in plies (values below 1 behave like 1)
        evaluator: Position evaluation function (default: MaterialEvaluator)

    Returns:
        SearchResult. move is None when there are no legal moves.
    """
    if evaluator is None:
        evaluator = MaterialEvaluator()

    mover = current_side(board)
    maximizing = mover == chess.WHITE

    best_move = None
    best_score = 0
    nodes = [0]

    for move in legal_moves(board, mover):
        with branch(board, move):
            score = alpha_beta(
                board, depth - 1, SCORE_MIN, SCORE_MAX, not maximizing, evaluator, nodes
            )

        if best_move is None or (score > best_score if maximizing else score < best_score):
            best_move = move
            best_score = score

    logger.debug(
        f"Search depth={depth} best={best_move.uci() if best_move else None} "
        f"score={best_score} nodes={nodes[0]}"
    )

    return SearchResult(move=best_move, score=best_score, nodes=nodes[0], depth=max(depth, 1))


def select_best_move(
    board: chess.Board,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> Optional[chess.Move]:
    """
    Return the best move for the side to move, or None if there is none.

    A None result is not an error: the position is checkmate or stalemate
    and the caller decides how to report it.
    """
    return search(board, depth, evaluator).move
