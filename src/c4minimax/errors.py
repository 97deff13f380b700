# src/c4minimax/errors.py

from __future__ import annotations


class InvalidMove(ValueError):
    """A move that cannot be played: the column is full or does not exist."""


class OutOfRangeColumn(InvalidMove):
    """Column index outside the board. A caller bug rather than a game outcome."""

    def __init__(self, col: int, cols: int) -> None:
        super().__init__(f"Column {col} out of range (0..{cols - 1}).")
        self.col = col
