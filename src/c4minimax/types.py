# src/c4minimax/types.py

from __future__ import annotations
from enum import IntEnum
from typing import Literal, NewType, Tuple


class Cell(IntEnum):
    EMPTY = 0
    HUMAN = 1     # Player 1
    COMPUTER = 2  # Player 2


Player = Literal[Cell.HUMAN, Cell.COMPUTER]
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col)


def other(player: Player) -> Player:
    return Cell.COMPUTER if player == Cell.HUMAN else Cell.HUMAN
