# src/c4minimax/core/board.py

from __future__ import annotations
from contextlib import contextmanager
from operator import index
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List, Optional, Sequence

from c4minimax.config import ROWS, COLS
from c4minimax.errors import OutOfRangeColumn
from c4minimax.types import Cell, Coord, Player

_GLYPHS = {".": Cell.EMPTY, "H": Cell.HUMAN, "C": Cell.COMPUTER}


@dataclass(slots=True)
class Board:
    rows: ClassVar[int] = ROWS
    cols: ClassVar[int] = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from a text picture, top row first.
        '.' is empty, 'H' is the human, 'C' is the computer.
        Gravity is not checked; callers are expected to draw legal positions.
        """
        if len(rows) != cls.rows or any(len(line) != cls.cols for line in rows):
            raise ValueError(f"Expected {cls.rows} rows of {cls.cols} cells.")
        try:
            grid = [[_GLYPHS[ch] for ch in line] for line in rows]
        except KeyError as e:
            raise ValueError(f"Unknown cell glyph {e.args[0]!r}.") from None
        return cls(grid=grid)

    def to_rows(self) -> List[str]:
        inv = {v: k for k, v in _GLYPHS.items()}
        return ["".join(inv[cell] for cell in row) for row in self.grid]

    def copy(self) -> "Board":
        return Board(grid=[row[:] for row in self.grid])

    def reset(self) -> None:
        for row in self.grid:
            for c in range(self.cols):
                row[c] = Cell.EMPTY

    def _check_col(self, col: int) -> int:
        c = index(col)  # TypeError for floats and strings; no truncation
        if c < 0 or c >= self.cols:
            raise OutOfRangeColumn(c, self.cols)
        return c

    def _check_row(self, row: int) -> int:
        r = index(row)
        if r < 0 or r >= self.rows:
            raise IndexError(f"Row {r} out of range (0..{self.rows - 1}).")
        return r

    def drop_target(self, col: int) -> Optional[int]:
        """Row a piece dropped into `col` would land on, or None if the column is full."""
        c = self._check_col(col)
        for r in range(self.rows):
            if self.grid[r][c] is not Cell.EMPTY:
                return None if r == 0 else r - 1
        return self.rows - 1

    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self.grid for cell in row)

    def is_valid_drop(self, row: int, col: int) -> bool:
        """
        A cell is playable if it is empty and either on the floor or resting
        on an occupied cell (gravity support).
        """
        c = self._check_col(col)
        r = self._check_row(row)
        if self.grid[r][c] is not Cell.EMPTY:
            return False
        return r == self.rows - 1 or self.grid[r + 1][c] is not Cell.EMPTY

    def valid_drops(self) -> List[Coord]:
        return [
            (r, c)
            for c in range(self.cols)
            for r in range(self.rows)
            if self.is_valid_drop(r, c)
        ]

    def place(self, row: int, col: int, player: Player) -> None:
        self.grid[self._check_row(row)][self._check_col(col)] = player

    def clear(self, row: int, col: int) -> None:
        self.grid[self._check_row(row)][self._check_col(col)] = Cell.EMPTY

    @contextmanager
    def placed(self, row: int, col: int, player: Player) -> Iterator["Board"]:
        """
        Put `player` on (row, col) for the duration of the block.
        The cell is emptied again on every exit path, including early
        returns and exceptions.
        """
        self.place(row, col, player)
        try:
            yield self
        finally:
            self.clear(row, col)
