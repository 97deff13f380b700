from __future__ import annotations
from dataclasses import dataclass, field

from c4minimax.core.board import Board
from c4minimax.core.rules import IN_PROGRESS, Outcome
from c4minimax.types import Cell, Player


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = Cell.HUMAN
    outcome: Outcome = IN_PROGRESS
    last_status: str = "Player 1 starts."
