"""
player.py - Computer player adapter for interactive applications

The search is a blocking, CPU-bound call that can take up to the full time
budget. ComputerPlayer wraps it for a host application: get_move() blocks,
get_move_async() runs the same search in a worker thread so an event loop
stays responsive, and the column comes back to the awaiting task.
"""

import asyncio
from typing import Iterable, Optional

from c4engine.ai.search import SearchEngine, SearchResult
from c4engine.config import SearchConfig, DEFAULT_MAX_DEPTH, DEFAULT_TIME_LIMIT_MS
from c4engine.debug import debug
from c4engine.utils import InvalidPlayerError, is_player


class ComputerPlayer:
    """
    A computer-controlled side that answers with a single column.

    The player keeps no game state between calls; the host owns the board,
    applies the returned move and decides when it is this side's turn.
    """

    def __init__(self, player: int, max_depth: int = DEFAULT_MAX_DEPTH,
                 time_limit_ms: int = DEFAULT_TIME_LIMIT_MS,
                 config: Optional[SearchConfig] = None):
        """
        Initialize the computer player.

        Args:
            player: Which side this is (1 or 2)
            max_depth: Maximum search depth
            time_limit_ms: Budget per move in milliseconds
            config: Geometry and evaluation weights (limits above take precedence)
        """
        if not is_player(player):
            raise InvalidPlayerError(f"Player must be 1 or 2, got {player!r}")
        self.player = int(player)
        base = config or SearchConfig()
        self.config = base.replace(max_depth=max_depth, time_limit_ms=time_limit_ms).validate()
        self.last_result: Optional[SearchResult] = None

    def get_move(self, cells: Iterable[int]) -> int:
        """
        Choose a column for this player (blocking).

        Args:
            cells: Flat row-major board snapshot

        Returns:
            A legal column index
        """
        result = SearchEngine(self.config).run(cells, self.player)
        self.last_result = result
        debug.info(f"Player {self.player} chose column {result.column} via {result.source} "
                   f"(depth {result.depth_reached}, {result.elapsed_ms:.0f} ms)", "player")
        return result.column

    async def get_move_async(self, cells: Iterable[int]) -> int:
        """
        Choose a column without blocking the running event loop.

        The snapshot is copied before the worker thread starts, so the caller
        may keep using its own board object meanwhile.
        """
        snapshot = list(cells.to_list() if hasattr(cells, "to_list") else cells)
        return await asyncio.to_thread(self.get_move, snapshot)
