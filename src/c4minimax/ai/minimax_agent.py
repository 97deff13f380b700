from __future__ import annotations

import time
from dataclasses import dataclass, field

from c4minimax.ai.search import SearchStats, compute_computer_move
from c4minimax.config import MAX_DEPTH
from c4minimax.game.state import GameState
from c4minimax.types import Move


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    prune: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        stats = SearchStats()
        start = time.perf_counter()
        move = compute_computer_move(state.board, prune=self.prune, stats=stats)
        elapsed = time.perf_counter() - start

        self.last_info = {
            "depth": MAX_DEPTH,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": stats.score if stats.score in (float("inf"), float("-inf")) else int(stats.score),
            "move_col": int(move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return move
