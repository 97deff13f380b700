from __future__ import annotations

import random

from c4minimax.core.board import Board
from c4minimax.scripts.benchmark import random_position
from c4minimax.types import Cell

# Full board except (0, 2) with no four for either side.
NEARLY_FULL = [
    "CC.CCHC",
    "HHCHHHC",
    "CCHCCHC",
    "HHCHHCH",
    "CCHCCHC",
    "HHCHHCH",
]


def mirrored(board: Board) -> Board:
    return Board(grid=[row[::-1] for row in board.grid])


def swapped(board: Board) -> Board:
    flip = {Cell.EMPTY: Cell.EMPTY, Cell.HUMAN: Cell.COMPUTER, Cell.COMPUTER: Cell.HUMAN}
    return Board(grid=[[flip[cell] for cell in row] for row in board.grid])


def sample_positions(count: int, max_ply: int = 14, seed: int = 7) -> list[Board]:
    """Random mid-game positions with no four on the board."""
    out = []
    for i in range(count):
        rng = random.Random(seed + i)
        board, _ = random_position(rng, rng.randint(2, max_ply))
        out.append(board)
    return out
