from __future__ import annotations
import random
from dataclasses import dataclass, field

from c4minimax.errors import InvalidMove
from c4minimax.game.state import GameState
from c4minimax.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Move:
        cols = sorted({c for _, c in state.board.valid_drops()})
        if not cols:
            raise InvalidMove("No valid moves: the board is full.")
        return Move(self.rng.choice(cols))
