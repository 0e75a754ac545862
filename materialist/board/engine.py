"""
Board Engine Adapter

Thin wrapper over python-chess exposing the operations the search needs.

Mutation Discipline:
    The search never copies a position. It applies a move, recurses, and
    undoes the move on the very same chess.Board. push() and pop() are exact
    inverses, so after any apply/undo pair the board compares equal to what
    it was before (same FEN, same move stack).

    branch() wraps that pair in a context manager so the undo runs on every
    exit path: normal completion, an alpha-beta cutoff (break), or an
    exception raised deeper in the tree.

Reference:
    python-chess: https://python-chess.readthedocs.io/
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

import chess


class BoardError(ValueError):
    """Base class for board parsing errors."""


class FenError(BoardError):
    """Raised when a FEN string cannot be parsed."""


class MoveNotationError(BoardError):
    """Raised when a move cannot be converted to or from UCI notation."""


def default_position() -> chess.Board:
    """Return a new board set to the standard initial position."""
    return chess.Board()


def position_from_fen(text: str) -> chess.Board:
    """
    Build a board from a FEN string.

    Args:
        text: Full FEN (piece placement, side, castling, en passant,
              halfmove clock, fullmove number). Trailing counters may be
              omitted, as python-chess allows.

    Returns:
        chess.Board set to the position

    Raises:
        FenError: If the FEN is malformed
    """
    if not text.strip():
        raise FenError("empty fen")

    try:
        return chess.Board(text)
    except ValueError as e:
        raise FenError(f"{text!r}: {e}") from e


def legal_moves(board: chess.Board, side: chess.Color) -> List[chess.Move]:
    """
    List the legal moves of `side` in python-chess generation order.

    The order is deterministic for a given position and is used as-is for
    search. Only the side to move has legal moves, so asking for the other
    side returns an empty list.
    """
    if side != board.turn:
        return []
    return list(board.legal_moves)


def apply(board: chess.Board, move: chess.Move) -> None:
    """Play `move` on `board` in place."""
    board.push(move)


def undo(board: chess.Board) -> chess.Move:
    """Take back the most recently applied move and return it."""
    return board.pop()


@contextmanager
def branch(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    """
    Apply `move` for the duration of the with-block, then undo it.

    Example:
        with branch(board, move):
            score = alpha_beta(board, ...)
        # board is back to its previous state here
    """
    apply(board, move)
    try:
        yield board
    finally:
        undo(board)


def current_side(board: chess.Board) -> chess.Color:
    """Return the side to move."""
    return board.turn


def game_ended(board: chess.Board) -> Optional[chess.Termination]:
    """
    Detect a finished game.

    Covers checkmate, stalemate, insufficient material, the seventy-five
    move rule and fivefold repetition. Claimable draws (threefold, fifty
    moves) do not end the game here.

    Returns:
        chess.Termination if the game is over, None otherwise
    """
    outcome = board.outcome()
    if outcome is None:
        return None
    return outcome.termination


def move_from_algebraic(text: str) -> chess.Move:
    """
    Parse a UCI move string such as "e2e4" or "e7e8q".

    Raises:
        MoveNotationError: If the text is not a valid UCI move
    """
    try:
        move = chess.Move.from_uci(text)
    except ValueError as e:
        raise MoveNotationError(f"invalid move {text!r}: {e}") from e

    if not move:
        raise MoveNotationError(f"null move {text!r} cannot be played")

    return move


def move_to_algebraic(move: chess.Move) -> str:
    """
    Format a move in UCI notation.

    Raises:
        MoveNotationError: For the null move, which has no playable form
    """
    if not move:
        raise MoveNotationError("null move has no algebraic form")
    return move.uci()
