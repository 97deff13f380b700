from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from c4minimax.game.state import GameState
from c4minimax.types import Move
from c4minimax.ui.prompts import parse_move


@dataclass(slots=True)
class HumanAgent:
    name: str = "Human"
    read: Callable[[str], str] = input

    def ask_move(self, state: GameState, label: str) -> Optional[Move]:
        """Prompt for a column. None means the player asked to quit."""
        return parse_move(self.read(f"{label} move: "), state.board.cols)

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called.")
