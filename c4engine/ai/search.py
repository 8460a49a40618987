"""
search.py - Iterative-deepening negamax with alpha-beta pruning

This module provides the SearchEngine, which picks a column for the side to
move within a hard wall-clock budget:

1. One-ply tactics first (immediate win, forced block)
2. Iterative deepening from depth 1 up to max_depth, each iteration a full
   negamax alpha-beta search with center-first move ordering
3. A cooperative deadline polled at every node; an iteration that runs out of
   time is thrown away and the answer of the deepest completed one is kept

An aborted subtree is signalled by returning None (ABORTED) instead of a
score, so "stop and discard this depth" travels up the recursion as a plain
return value.
"""

import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from c4engine.ai.evaluation import evaluate
from c4engine.ai.tactics import tactical_move
from c4engine.config import (SearchConfig, DEFAULT_MAX_DEPTH, DEFAULT_TIME_LIMIT_MS)
from c4engine.debug import debug, DebugLevel
from c4engine.game.board import Board
from c4engine.game.rules import opponent, validate_request

# Terminal scores; any magnitude at or above the threshold is a proven result
FORCED_WIN = 1_000_000
FORCED_LOSS = -FORCED_WIN
FORCED_WIN_THRESHOLD = 100_000

INF = 10 ** 9
ABORTED = None

# SearchResult.source values
SOURCE_WIN = "win"
SOURCE_BLOCK = "block"
SOURCE_SEARCH = "search"
SOURCE_FALLBACK = "fallback"


@dataclass
class DepthIteration:
    """Outcome of one fully completed iterative-deepening iteration."""
    depth: int
    column: int
    score: int
    nodes: int


@dataclass
class SearchResult:
    """Result of one engine call."""
    column: int
    score: Optional[int]
    depth_reached: int
    nodes_searched: int
    elapsed_ms: float
    source: str
    timed_out: bool = False
    iterations: List[DepthIteration] = field(default_factory=list)

    @property
    def is_forced(self) -> bool:
        """True when the score proves a win or loss within the searched horizon."""
        return self.score is not None and abs(self.score) >= FORCED_WIN_THRESHOLD


def is_forced_score(score: int) -> bool:
    return abs(score) >= FORCED_WIN_THRESHOLD


class SearchEngine:
    """
    Bounded-time game-tree search for one side of a connection game.

    The caller's board is never modified: the engine validates the input into
    a private copy, gives every root candidate its own clone, and below the
    root applies and undoes moves on that clone inside try/finally.
    """

    def __init__(self, config: Optional[SearchConfig] = None, use_tactics: bool = True):
        """
        Initialize the engine.

        Args:
            config: Limits, board geometry and evaluation weights
            use_tactics: Run the one-ply win/block shortcut before searching
        """
        self.config = (config or SearchConfig()).validate()
        self.use_tactics = use_tactics
        self.nodes_searched = 0  # For performance tracking

    def run(self, board: Union[Board, Iterable[int]], mover: int,
            max_depth: Optional[int] = None,
            time_limit_ms: Optional[int] = None) -> SearchResult:
        """
        Choose a column for mover.

        Args:
            board: Board or flat 0/1/2 snapshot (config geometry)
            mover: Player to move (1 or 2)
            max_depth: Override of config.max_depth
            time_limit_ms: Override of config.time_limit_ms

        Returns:
            SearchResult holding a legal column

        Raises:
            ContractViolation: invalid board, mover or limits, or a full board
        """
        start = time.perf_counter()
        max_depth = self.config.max_depth if max_depth is None else max_depth
        time_limit_ms = self.config.time_limit_ms if time_limit_ms is None else time_limit_ms
        work = validate_request(board, mover, max_depth, time_limit_ms,
                                self.config.rows, self.config.cols)
        deadline = start + time_limit_ms / 1000.0
        self.nodes_searched = 0

        if self.use_tactics:
            tactic = tactical_move(work, mover)
            if tactic is not None:
                return SearchResult(column=tactic.column, score=None, depth_reached=0,
                                    nodes_searched=0, elapsed_ms=_elapsed_ms(start),
                                    source=tactic.kind)

        marker = f"search-{id(self)}"
        debug.start_timer(marker)

        moves = work.legal_moves_center_first()
        best_column = moves[0]
        best_score: Optional[int] = None
        depth_reached = 0
        timed_out = False
        iterations: List[DepthIteration] = []

        for depth in range(1, max_depth + 1):
            outcome = self._search_root(work, moves, depth, mover, deadline)
            if outcome is ABORTED:
                timed_out = True
                debug.debug(f"Time limit hit during depth {depth}; keeping column {best_column} "
                            f"from depth {depth_reached}", "search")
                break

            best_column, best_score = outcome
            depth_reached = depth
            iterations.append(DepthIteration(depth, best_column, best_score, self.nodes_searched))
            debug.debug(f"Depth {depth}: column {best_column} score {best_score} "
                        f"({self.nodes_searched} nodes)", "search")

            if is_forced_score(best_score):
                debug.debug(f"Forced result found at depth {depth}, stopping", "search")
                break

        debug.end_timer(marker, "search")
        result = SearchResult(
            column=best_column,
            score=best_score,
            depth_reached=depth_reached,
            nodes_searched=self.nodes_searched,
            elapsed_ms=_elapsed_ms(start),
            source=SOURCE_SEARCH if depth_reached else SOURCE_FALLBACK,
            timed_out=timed_out,
            iterations=iterations,
        )
        debug.debug(f"Player {mover} plays column {result.column} (depth {depth_reached}, "
                    f"{result.nodes_searched} nodes, {result.elapsed_ms:.1f} ms)", "search")
        return result

    def _search_root(self, board: Board, moves: List[int], depth: int, mover: int,
                     deadline: float) -> Optional[Tuple[int, int]]:
        """
        Search every root candidate to the given depth.

        Args:
            board: Position to move from (not modified)
            moves: Candidates, center first
            depth: Depth of this iteration (>= 1)
            mover: Player to move
            deadline: perf_counter() value at which to give up

        Returns:
            (best column, its score), or ABORTED if the deadline passed
        """
        other = opponent(mover)
        alpha, beta = -INF, INF
        best_column, best_score = moves[0], -INF

        for column in moves:
            if time.perf_counter() > deadline:
                return ABORTED

            child = board.with_move(column, mover)
            value = self._negamax(child, depth - 1, -beta, -alpha, other, deadline)
            if value is ABORTED:
                return ABORTED

            score = -value
            # Ties keep the earlier, more central candidate
            if score > best_score:
                best_score = score
                best_column = column
            alpha = max(alpha, score)

        return best_column, best_score

    def _negamax(self, board: Board, depth: int, alpha: int, beta: int,
                 mover: int, deadline: float) -> Optional[int]:
        """
        Negamax with alpha-beta pruning.

        Args:
            board: Scratch board; restored before returning
            depth: Remaining search depth
            alpha: Best score the mover can already guarantee
            beta: Score above which the opponent avoids this line
            mover: Player to move at this node
            deadline: perf_counter() value at which to give up

        Returns:
            Score from mover's perspective, or ABORTED
        """
        if time.perf_counter() > deadline:
            return ABORTED
        self.nodes_searched += 1

        # Checked before the depth cutoff so a win scores the same at any ply
        winner = board.winner()
        if winner is not None:
            return FORCED_WIN if winner == mover else FORCED_LOSS

        if depth <= 0:
            return evaluate(board, mover, self.config.weights)

        moves = board.legal_moves_center_first()
        if not moves:
            # Full board without a four: a draw leaf
            return evaluate(board, mover, self.config.weights)

        other = opponent(mover)
        value = -INF
        for column in moves:
            board.drop(column, mover)
            try:
                child = self._negamax(board, depth - 1, -beta, -alpha, other, deadline)
            finally:
                board.lift(column)

            if child is ABORTED:
                return ABORTED

            score = -child
            if score > value:
                value = score
            if value > alpha:
                alpha = value
            if alpha >= beta:
                break

        return value


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def analyze(cells: Iterable[int], mover: int, max_depth: int = DEFAULT_MAX_DEPTH,
            time_limit_ms: int = DEFAULT_TIME_LIMIT_MS,
            config: Optional[SearchConfig] = None) -> SearchResult:
    """Run one search and return the full SearchResult."""
    return SearchEngine(config).run(cells, mover, max_depth, time_limit_ms)


def search(cells: Iterable[int], mover: int, max_depth: int = DEFAULT_MAX_DEPTH,
           time_limit_ms: int = DEFAULT_TIME_LIMIT_MS,
           config: Optional[SearchConfig] = None) -> int:
    """
    Pick a legal column for mover within the time budget.

    Args:
        cells: Flat row-major board, 0 empty / 1 / 2 (6x7 unless config says otherwise)
        mover: Player to move (1 or 2)
        max_depth: Maximum search depth (positive)
        time_limit_ms: Wall-clock budget in milliseconds (positive)
        config: Optional geometry and evaluation weights

    Returns:
        Column index in [0, cols)

    Raises:
        ContractViolation: invalid input or a board with no legal move
    """
    return analyze(cells, mover, max_depth, time_limit_ms, config).column


def get_best_move(cells: Iterable[int], player: int, depth: int = 6) -> int:
    """Fixed-depth convenience call with a 2 second budget."""
    return search(cells, player, depth, 2000)


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG, components=["search", "tactics"])

    print("Testing SearchEngine")
    print("=" * 40)

    board = Board()
    for col, player in [(3, 1), (3, 2), (2, 1), (4, 2)]:
        board.drop(col, player)

    engine = SearchEngine(SearchConfig(max_depth=8, time_limit_ms=1000))
    result = engine.run(board, 1)
    print(f"Best move: column {result.column} ({result.source})")
    print(f"Depth reached: {result.depth_reached}, nodes: {result.nodes_searched}")
    print(f"Time: {result.elapsed_ms:.1f} ms")
