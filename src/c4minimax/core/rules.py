from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple

from c4minimax.config import ROWS, COLS, CONNECT_N
from c4minimax.core.board import Board
from c4minimax.types import Cell, Coord, Player, other

# Rays anchored at a cell: horizontal, vertical, down-right, down-left
_RAYS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True, slots=True)
class Outcome:
    kind: OutcomeKind
    winner: Optional[Player] = None

    @property
    def is_over(self) -> bool:
        return self.kind is not OutcomeKind.IN_PROGRESS


IN_PROGRESS = Outcome(OutcomeKind.IN_PROGRESS)
TIE = Outcome(OutcomeKind.TIE)


def win(player: Player) -> Outcome:
    return Outcome(OutcomeKind.WIN, player)


def _ray(r: int, c: int, dr: int, dc: int) -> List[Coord]:
    return [(r + i * dr, c + i * dc) for i in range(CONNECT_N)]


def _owns_all(board: Board, cells: List[Coord], player: Player) -> bool:
    g = board.grid
    return all(0 <= r < ROWS and 0 <= c < COLS and g[r][c] == player for r, c in cells)


def winning_line(board: Board, player: Player) -> Optional[List[Coord]]:
    for r in range(ROWS):
        for c in range(COLS):
            for dr, dc in _RAYS:
                cells = _ray(r, c, dr, dc)
                if _owns_all(board, cells, player):
                    return cells
    return None


def check_win(board: Board, player: Player) -> bool:
    return winning_line(board, player) is not None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    for p in (Cell.HUMAN, Cell.COMPUTER):
        line = winning_line(board, p)
        if line is not None:
            return p, line
    return None


def outcome(board: Board, last: Optional[Player] = None) -> Outcome:
    """
    Derive the game state from the grid. `last` is the player who just moved;
    checking them first matters only for positions the search builds, where
    both sides can hold a four.
    """
    order = (Cell.HUMAN, Cell.COMPUTER) if last is None else (last, other(last))
    for p in order:
        if check_win(board, p):
            return win(p)
    if board.is_full():
        return TIE
    return IN_PROGRESS
