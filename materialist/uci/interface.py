"""
UCI Protocol Implementation

This module implements the Universal Chess Interface (UCI) protocol for
communication between the engine and GUI applications.

UCI Commands Supported:
    - uci: Identify engine
    - isready: Synchronization check
    - ucinewgame: Forget the current position
    - position: Set board position
    - go: Search at fixed depth and answer with bestmove
    - quit: Shutdown engine

Anything else, blank lines included, is ignored.

Execution Model:
    Single-threaded. 'go' runs the search inline, so no further command is
    read until 'bestmove' has been written. Every response is flushed as
    soon as it is written.

Error Responses:
    - 'go' without a position, or with no legal move: "bestmove 0000"
    - Invalid FEN: "info string invalid fen: ..." and the position is cleared
    - Unparseable or illegal moves in a move list: skipped

References:
    - UCI Protocol: https://www.chessprogramming.org/UCI
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, TextIO

import chess

from materialist.board import (
    BoardError,
    FenError,
    apply,
    current_side,
    default_position,
    legal_moves,
    move_from_algebraic,
    move_to_algebraic,
    position_from_fen,
)
from materialist.evaluation.base import Evaluator
from materialist.evaluation.material import MaterialEvaluator
from materialist.search.minimax import search
from materialist.uci.config import EngineConfig, default_log_file

NULL_MOVE = "0000"


def setup_logger(debug: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Setup file-based logger for UCI debugging.

    stdout carries the protocol, so nothing is ever logged there.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Destination file; None disables logging output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("materialist")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class UCIEngine:
    """
    UCI-compliant chess engine interface.

    This class handles all UCI communication and drives the search with the
    configured evaluator.

    Attributes:
        config: Engine configuration
        board: Current chess position, None until a 'position' command
        evaluator: Position evaluation function
        running: False once 'quit' has been handled

    Methods:
        run: Main UCI command loop
        handle_uci: Respond to 'uci' command
        handle_isready: Respond to 'isready' command
        handle_ucinewgame: Forget the current position
        handle_position: Set board position
        handle_go: Search and answer with bestmove
        handle_quit: Stop the command loop
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        evaluator: Optional[Evaluator] = None,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        """
        Initialize UCI engine.

        Args:
            config: Engine configuration (default: EngineConfig())
            evaluator: Position evaluator (default: MaterialEvaluator)
            input_stream: Command source (default: sys.stdin)
            output_stream: Response sink (default: sys.stdout)
        """
        self.config = config if config else EngineConfig()
        self.evaluator = evaluator if evaluator else MaterialEvaluator()
        self.input_stream = input_stream
        self.output_stream = output_stream

        self.board: Optional[chess.Board] = None
        self.running = True

        self.logger = setup_logger(debug=self.config.debug, log_file=self.config.log_file)
        self.logger.info(f"=== {self.config.name} Engine Started ===")
        if self.config.log_file:
            self.logger.info(f"Log file: {self.config.log_file}")

    def send(self, line: str):
        """Write one response line and flush it."""
        stream = self.output_stream if self.output_stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()
        self.logger.debug(f"<<< {line}")

    def run(self):
        """
        Main UCI command loop.

        Reads commands until 'quit' or end of input. Read and write errors
        are not handled here: without a working stream the engine stops.
        """
        stream = self.input_stream if self.input_stream is not None else sys.stdin
        self.running = True

        while self.running:
            line = stream.readline()
            if not line:
                self.logger.info("EOF received, shutting down")
                break

            self.execute(line)

        self.logger.info(f"=== {self.config.name} Engine Stopped ===")

    def execute(self, command: str):
        """
        Dispatch a single command line.

        Args:
            command: Raw line, e.g. "position startpos moves e2e4"
        """
        tokens = command.split()
        if not tokens:
            return

        self.logger.debug(f">>> {command.strip()}")

        cmd = tokens[0]

        if cmd == "uci":
            self.handle_uci()

        elif cmd == "isready":
            self.handle_isready()

        elif cmd == "ucinewgame":
            self.handle_ucinewgame()

        elif cmd == "position":
            self.handle_position(tokens)

        elif cmd == "go":
            self.handle_go(tokens)

        elif cmd == "quit":
            self.handle_quit()

        else:
            # Unknown commands are ignored per UCI
            self.logger.debug(f"Unknown command ignored: {command.strip()}")

    def handle_uci(self):
        """
        Handle 'uci' command - identify engine.

        Response:
            id name Materialist 0.1.0
            id author ...
            uciok
        """
        self.logger.info("Handling: uci")

        self.send(f"id name {self.config.name} {self.config.version}")
        self.send(f"id author {self.config.author}")
        self.send("uciok")

    def handle_isready(self):
        """Handle 'isready' command - synchronization."""
        self.logger.info("Handling: isready")
        self.send("readyok")

    def handle_ucinewgame(self):
        """Handle 'ucinewgame' command - forget the current position."""
        self.logger.info("Handling: ucinewgame - clearing position")
        self.board = None

    def handle_position(self, tokens: List[str]):
        """
        Handle 'position' command - set board position.

        Formats:
            position startpos
            position startpos moves e2e4 e7e5
            position fen <FEN string>
            position fen <FEN string> moves e2e4

        Args:
            tokens: Command tokens (e.g., ['position', 'startpos', 'moves', 'e2e4'])
        """
        self.logger.info(f"Handling: position {' '.join(tokens[1:])}")

        if len(tokens) < 2:
            self.logger.warning("Position command with insufficient arguments")
            return

        try:
            move_index = tokens.index("moves")
        except ValueError:
            move_index = len(tokens)

        if tokens[1] == "startpos":
            board = default_position()
        elif tokens[1] == "fen":
            fen = " ".join(tokens[2:move_index])
            try:
                board = position_from_fen(fen)
            except FenError as e:
                self.logger.error(f"Invalid FEN: {e}")
                self.send(f"info string invalid fen: {fen}")
                self.board = None
                return
        else:
            self.logger.warning(f"Unknown position type: {tokens[1]}")
            return

        self.replay_moves(board, tokens[move_index + 1:])
        self.board = board

        fen = board.fen()
        self.logger.info(f"Position updated: {fen[:60]}{'...' if len(fen) > 60 else ''}")
        self.logger.debug(f"Full FEN: {fen}")

    def replay_moves(self, board: chess.Board, move_strings: List[str]) -> List[chess.Move]:
        """
        Play a list of UCI moves on `board`, skipping any that cannot be played.

        Args:
            board: Board to play the moves on
            move_strings: Moves in UCI notation

        Returns:
            The moves actually applied
        """
        applied = []

        for move_str in move_strings:
            try:
                move = move_from_algebraic(move_str)
            except BoardError as e:
                self.logger.warning(f"Skipping move: {e}")
                continue

            if move not in legal_moves(board, current_side(board)):
                self.logger.warning(f"Skipping illegal move: {move_str}")
                continue

            apply(board, move)
            applied.append(move)

        if applied:
            self.logger.debug(f"Applied moves: {' '.join(m.uci() for m in applied)}")

        return applied

    def handle_go(self, tokens: List[str]):
        """
        Handle 'go' command - search and answer with bestmove.

        Formats:
            go
            go depth 3

        Time control parameters (wtime, movetime, ...) are accepted and
        ignored: the engine always searches to a fixed depth.

        Output:
            info depth X score cp Y nodes Z time T
            bestmove <move>

        Args:
            tokens: Command tokens (e.g., ['go', 'depth', '3'])
        """
        self.logger.info(f"Handling: go {' '.join(tokens[1:])}")

        depth = self.parse_depth(tokens)

        if self.board is None:
            self.logger.warning("go received before any position, no move available")
            self.send(f"bestmove {NULL_MOVE}")
            return

        start_time = time.time()

        try:
            fen = self.board.fen()
            self.logger.info(f"Search started: depth={depth}, position={fen[:50]}{'...' if len(fen) > 50 else ''}")

            result = search(self.board, depth, self.evaluator)
        except Exception as e:
            self.logger.error(f"Search error: {e}", exc_info=True)
            self.send(f"bestmove {NULL_MOVE}")
            return

        elapsed_ms = int((time.time() - start_time) * 1000)

        if result.move is None:
            self.logger.warning("No legal moves in current position")
            self.send(f"bestmove {NULL_MOVE}")
            return

        self.logger.info(
            f"Search complete: best_move={result.move.uci()}, score={result.score}, "
            f"nodes={result.nodes}, time={elapsed_ms}ms"
        )

        self.send(
            f"info depth {result.depth} score cp {result.score} "
            f"nodes {result.nodes} time {elapsed_ms}"
        )
        self.send(f"bestmove {move_to_algebraic(result.move)}")

    def parse_depth(self, tokens: List[str]) -> int:
        """
        Read 'depth N' from go tokens, falling back to the configured depth.
        """
        if "depth" not in tokens[1:]:
            return self.config.search_depth

        index = tokens.index("depth")
        try:
            depth = int(tokens[index + 1])
        except (IndexError, ValueError):
            self.logger.warning(f"Invalid depth in: {' '.join(tokens)}")
            return self.config.search_depth

        if depth < 1:
            self.logger.warning(f"Depth {depth} too small, using 1")
            return 1

        return depth

    def handle_quit(self):
        """Handle 'quit' command - stop the command loop."""
        self.logger.info("Handling: quit - shutting down engine")
        self.running = False


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point: parse options and run the command loop."""
    parser = argparse.ArgumentParser(description="Materialist UCI chess engine")
    parser.add_argument(
        "--depth",
        type=int,
        default=EngineConfig.search_depth,
        help=f"Fixed search depth in plies (default: {EngineConfig.search_depth})",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file (default: ~/.materialist/engine.log)",
    )
    parser.add_argument("--no-log", action="store_true", help="Disable file logging")
    parser.add_argument("--debug", action="store_true", help="Log every command and response")

    args = parser.parse_args(argv)

    if args.no_log:
        log_file = None
    elif args.log_file is not None:
        log_file = args.log_file
    else:
        log_file = default_log_file()

    try:
        config = EngineConfig(search_depth=args.depth, debug=args.debug, log_file=log_file)
    except ValueError as e:
        parser.error(str(e))

    engine = UCIEngine(config=config)
    engine.run()
    return 0
