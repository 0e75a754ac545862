"""
Unit Tests for Search Module

Tests for alpha-beta search, focusing on:
    - Board restored after every search (shared board, no copies)
    - No legal moves → None
    - Pruned result identical to plain minimax
    - Move choice for both colors
"""

import chess
import pytest
from materialist.evaluation import SCORE_MAX, SCORE_MIN, Evaluator, MaterialEvaluator, evaluate
from materialist.search import SearchResult, alpha_beta, search, select_best_move


FOOLS_MATE_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
STALEMATE_FEN = "k7/2Q5/1K6/8/8/8/8/8 b - - 0 1"

# White rook on d1 can take the undefended black queen on d5
WHITE_WINS_QUEEN_FEN = "4k3/8/8/3q4/8/8/8/3RK3 w - - 0 1"
# Same idea for Black: rook d8 takes the white queen on d4
BLACK_WINS_QUEEN_FEN = "3rk3/8/8/8/3Q4/8/8/4K3 b - - 0 1"
TWO_REPLIES_FEN = "7k/8/8/8/1p6/8/8/3B2RK b - - 0 1"

SMALL_POSITIONS = [
    "4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1",
    "4k3/8/8/3p4/4P3/8/8/4K3 b - - 0 1",
    "4k3/8/8/3q4/8/8/8/3RK3 w - - 0 1",
    "4k3/8/2n5/3p4/4P3/5N2/8/4K3 w - - 0 1",
    "7k/8/8/8/8/8/6q1/7K w - - 0 1",
]


def plain_minimax(board, depth, maximizing, nodes):
    """Reference minimax without pruning."""
    nodes[0] += 1

    if depth <= 0 or board.outcome() is not None:
        return evaluate(board)

    moves = list(board.legal_moves)
    if not moves:
        return evaluate(board)

    scores = []
    for move in moves:
        board.push(move)
        scores.append(plain_minimax(board, depth - 1, not maximizing, nodes))
        board.pop()

    return max(scores) if maximizing else min(scores)


class CountingEvaluator(Evaluator):
    """Material evaluator that records how often it is called."""

    def __init__(self):
        self.calls = 0

    def evaluate(self, board):
        self.calls += 1
        return evaluate(board)


class ExplodingEvaluator(Evaluator):
    """Evaluator that fails after a number of calls."""

    def __init__(self, fail_after):
        self.fail_after = fail_after
        self.calls = 0

    def evaluate(self, board):
        self.calls += 1
        if self.calls > self.fail_after:
            raise RuntimeError("evaluation failed")
        return evaluate(board)


class TestAlphaBeta:
    """Tests for the recursive alpha-beta core."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator()

    @pytest.mark.parametrize("fen", SMALL_POSITIONS)
    @pytest.mark.parametrize("maximizing", [True, False])
    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_matches_plain_minimax(self, evaluator, fen, maximizing, depth):
        """Test that pruning never changes the minimax value."""

        board = chess.Board(fen)

        expected = plain_minimax(board, depth, maximizing, [0])
        score = alpha_beta(board, depth, SCORE_MIN, SCORE_MAX, maximizing, evaluator)

        assert score == expected, f"alpha_beta={score}, minimax={expected} for {fen}"

    def test_two_replies_depth_two(self, evaluator):
        """Test a hand-checked tree with exactly two replies."""

        # Rook g1 cuts off the g-file, so Black has only Kh7 and b3.
        # After b3 White plays Bxb3 (830); after Kh7 nothing hangs (730).
        board = chess.Board(TWO_REPLIES_FEN)
        replies = {m.uci() for m in board.legal_moves}
        assert replies == {"h8h7", "b4b3"}

        expected = plain_minimax(board, 2, False, [0])
        score = alpha_beta(board, 2, SCORE_MIN, SCORE_MAX, False, evaluator)

        assert score == expected == 730
        assert select_best_move(board, 2, evaluator) == chess.Move.from_uci("h8h7")

    def test_pruning_visits_fewer_nodes(self, evaluator):
        """Test that cutoffs actually happen."""

        board = chess.Board("4k3/8/2n5/3p4/4P3/5N2/8/4K3 w - - 0 1")

        plain_nodes = [0]
        plain_minimax(board, 3, True, plain_nodes)

        pruned_nodes = [0]
        alpha_beta(board, 3, SCORE_MIN, SCORE_MAX, True, evaluator, pruned_nodes)

        assert pruned_nodes[0] < plain_nodes[0], (
            f"Alpha-beta visited {pruned_nodes[0]} nodes, minimax {plain_nodes[0]}"
        )

    def test_depth_zero_is_static_evaluation(self, evaluator):
        """Test that depth 0 returns the evaluation without searching."""

        board = chess.Board(WHITE_WINS_QUEEN_FEN)
        nodes = [0]

        score = alpha_beta(board, 0, SCORE_MIN, SCORE_MAX, True, evaluator, nodes)

        assert score == evaluate(board) == -400
        assert nodes[0] == 1

    def test_terminal_position_is_static_evaluation(self, evaluator):
        """Test that a finished game is evaluated, never the sentinel."""

        board = chess.Board(FOOLS_MATE_FEN)

        for maximizing in (True, False):
            score = alpha_beta(board, 3, SCORE_MIN, SCORE_MAX, maximizing, evaluator)
            assert score == evaluate(board)
            assert score not in (SCORE_MIN, SCORE_MAX)

    def test_leaf_count_without_cutoff(self):
        """Test that depth 1 evaluates each child exactly once."""

        board = chess.Board()
        evaluator = CountingEvaluator()

        alpha_beta(board, 1, SCORE_MIN, SCORE_MAX, True, evaluator)

        # Full window: alpha never reaches SCORE_MAX
        assert evaluator.calls == 20

    def test_board_restored(self, evaluator):
        """Test that the board is unchanged after the search."""

        board = chess.Board("4k3/8/2n5/3p4/4P3/5N2/8/4K3 w - - 0 1")
        before = board.copy()

        alpha_beta(board, 3, SCORE_MIN, SCORE_MAX, True, evaluator)

        assert board == before
        assert board.move_stack == before.move_stack

    def test_board_restored_on_exception(self):
        """Test that an error deep in the tree leaves the board intact."""

        board = chess.Board()
        before = board.copy()

        with pytest.raises(RuntimeError):
            alpha_beta(board, 3, SCORE_MIN, SCORE_MAX, True, ExplodingEvaluator(fail_after=50))

        assert board == before
        assert board.move_stack == []


class TestSelectBestMove:
    """Tests for the root search."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator()

    @pytest.mark.parametrize("depth", [0, 1, 2, 3])
    def test_board_unchanged(self, evaluator, depth):
        """Test that the root position is unchanged after a search."""

        board = chess.Board("r3k2r/pPp2ppp/8/3pP3/8/8/P1PP1PPP/R3K2R w KQkq d6 0 1")
        before = board.copy()
        fen_before = board.fen()

        move = select_best_move(board, depth, evaluator)

        assert move in board.legal_moves
        assert board == before
        assert board.fen() == fen_before
        assert board.move_stack == []

    @pytest.mark.parametrize("fen", [FOOLS_MATE_FEN, STALEMATE_FEN])
    def test_no_legal_moves_returns_none(self, evaluator, fen):
        """Test that checkmate and stalemate give None, not an error."""

        board = chess.Board(fen)

        assert select_best_move(board, 3, evaluator) is None

        result = search(board, 3, evaluator)
        assert result.move is None
        assert result.score == 0
        assert result.nodes == 0

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_white_takes_queen(self, evaluator, depth):
        """Test that White captures a hanging queen."""

        board = chess.Board(WHITE_WINS_QUEEN_FEN)

        result = search(board, depth, evaluator)

        assert result.move == chess.Move.from_uci("d1d5")
        assert result.score == 500

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_black_takes_queen(self, evaluator, depth):
        """Test that Black captures a hanging queen (minimizes the score)."""

        board = chess.Board(BLACK_WINS_QUEEN_FEN)

        result = search(board, depth, evaluator)

        assert result.move == chess.Move.from_uci("d8d4")
        assert result.score == -500

    def test_default_evaluator(self):
        """Test that the evaluator is optional."""

        board = chess.Board(WHITE_WINS_QUEEN_FEN)

        assert select_best_move(board, 1) == chess.Move.from_uci("d1d5")

    def test_ties_keep_first_generated_move(self, evaluator):
        """Test that equal scores keep the first move in generation order."""

        board = chess.Board()

        move = select_best_move(board, 1, evaluator)

        assert move == next(iter(board.legal_moves))

    def test_deterministic(self, evaluator):
        """Test that repeated searches agree."""

        board = chess.Board("4k3/8/2n5/3p4/4P3/5N2/8/4K3 w - - 0 1")

        first = search(board, 3, evaluator)
        second = search(board, 3, evaluator)

        assert first == second

    def test_root_score_matches_minimax(self, evaluator):
        """Test that the root score is the best child minimax value."""

        board = chess.Board("4k3/8/2n5/3p4/4P3/5N2/8/4K3 w - - 0 1")

        child_scores = []
        for move in list(board.legal_moves):
            board.push(move)
            child_scores.append(plain_minimax(board, 1, False, [0]))
            board.pop()

        result = search(board, 2, evaluator)

        assert result.score == max(child_scores)


class TestSearchResult:
    """Tests for SearchResult bookkeeping."""

    def test_fields(self):
        """Test that search reports depth and node count."""

        board = chess.Board()

        result = search(board, 2)

        assert isinstance(result, SearchResult)
        assert result.depth == 2
        assert result.nodes > 20, "Should visit every root child and more"
        assert result.move in board.legal_moves

    def test_depth_below_one_reported_as_one(self):
        """Test that a zero-depth root still looks one ply ahead."""

        board = chess.Board(WHITE_WINS_QUEEN_FEN)

        result = search(board, 0)

        assert result.depth == 1
        assert result.move == chess.Move.from_uci("d1d5")


class TestSearchIntegration:
    """Integration tests for complete search."""

    def test_self_play_stays_legal(self):
        """Test search throughout a short self-play game."""

        board = chess.Board()

        for _ in range(10):
            if board.is_game_over():
                break

            move = select_best_move(board, 2)

            assert move in board.legal_moves, f"Search returned illegal move: {move}"

            board.push(move)

    def test_capture_out_of_check(self):
        """Test that capturing the checking queen beats running away."""

        # Queen a8 checks the king on h1; Rxa8 is also mate (h8 boxed in)
        board = chess.Board("q6k/6pp/8/8/8/8/8/R6K w - - 0 1")

        move = select_best_move(board, 2)

        assert move == chess.Move.from_uci("a1a8")
