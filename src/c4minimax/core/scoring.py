from __future__ import annotations
from math import inf
from typing import Tuple

from c4minimax.config import CONNECT_N
from c4minimax.core.board import Board
from c4minimax.types import Cell, Coord, Player, other

# Growth directions measured from every piece: left, right, up, up-left, up-right.
# Downward rays are not scored.
DIRECTIONS: Tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (-1, -1), (-1, 1))


def _in_bounds(board: Board, r: int, c: int) -> bool:
    return 0 <= r < board.rows and 0 <= c < board.cols


def run_value(board: Board, r: int, c: int, dr: int, dc: int) -> float:
    """
    Value of the run that starts on (r, c) and heads in (dr, dc).

    Returns the run length when it is alive, 0 when it is dead, and inf once
    the run is already four long. Alive means the four cells starting here
    fit on the board, hold no opponent piece, and the first empty cell past
    the run can be played right now.
    """
    g = board.grid
    owner = g[r][c]
    opp = other(owner)

    run = 0
    while _in_bounds(board, r + run * dr, c + run * dc) and g[r + run * dr][c + run * dc] == owner:
        run += 1
    if run >= CONNECT_N:
        return inf

    for i in range(run, CONNECT_N):
        wr, wc = r + i * dr, c + i * dc
        if not _in_bounds(board, wr, wc) or g[wr][wc] == opp:
            return 0

    # The cell right after the run is in the window, so it is empty here.
    if not board.is_valid_drop(r + run * dr, c + run * dc):
        return 0
    return run


def cell_value(board: Board, r: int, c: int) -> float:
    """Potential of one piece for its owner: sum of its five directional runs."""
    return sum(run_value(board, r, c, dr, dc) for dr, dc in DIRECTIONS)


def evaluate(board: Board, perspective: Player = Cell.COMPUTER) -> float:
    """
    Heuristic value of the position, positive when it favours `perspective`.

    Human pieces count negatively and computer pieces positively; the sign is
    flipped at the end for the human's point of view. A four on the board
    makes the score infinite. When both players hold a four the human's one
    wins out.
    """
    g = board.grid
    total = 0.0
    computer_four = False

    for r in range(board.rows):
        for c in range(board.cols):
            owner = g[r][c]
            if owner is Cell.EMPTY:
                continue
            v = cell_value(board, r, c)
            if v == inf:
                if owner == Cell.HUMAN:
                    return -inf if perspective == Cell.COMPUTER else inf
                computer_four = True
            elif owner == Cell.HUMAN:
                total -= v
            else:
                total += v

    if computer_four:
        total = inf
    return total if perspective == Cell.COMPUTER else -total
