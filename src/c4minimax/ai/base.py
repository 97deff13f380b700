from __future__ import annotations
from typing import Protocol

from c4minimax.game.state import GameState
from c4minimax.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
