from __future__ import annotations

import logging
from dataclasses import dataclass
from math import inf
from typing import Optional

from c4minimax.config import MAX_DEPTH
from c4minimax.core.board import Board
from c4minimax.core.rules import check_win
from c4minimax.core.scoring import evaluate
from c4minimax.errors import InvalidMove
from c4minimax.types import Cell, Move, Player

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0
    score: float = 0.0  # value of the chosen move


@dataclass(frozen=True, slots=True)
class SearchResult:
    column: Move
    row: int
    score: float


def _after_placement(
    board: Board,
    mover: Player,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    prune: bool,
    stats: Optional[SearchStats],
) -> float:
    """
    Value of the position `mover` just created. A four made by that piece ends
    the line: it scores inf for the computer or -inf for the human, with no
    search below it.
    """
    if check_win(board, mover):
        if stats is not None:
            stats.nodes += 1
            stats.leaves += 1
        return inf if mover == Cell.COMPUTER else -inf
    return minimax(board, depth, maximizing, alpha, beta, prune=prune, stats=stats)


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: float = -inf,
    beta: float = inf,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Value of `board` for the computer, searching until `MAX_DEPTH` plies.

    The computer maximizes and the human minimizes. Every hypothetical piece is
    placed through `Board.placed`, so the grid is restored whatever path the
    loop leaves by. With `prune=False` the full tree is walked; the returned
    score is the same either way.
    """
    if stats is not None:
        stats.nodes += 1

    if depth == MAX_DEPTH or board.is_full():
        if stats is not None:
            stats.leaves += 1
        return evaluate(board, Cell.COMPUTER)

    mover = Cell.COMPUTER if maximizing else Cell.HUMAN
    best = -inf if maximizing else inf

    for r, c in board.valid_drops():
        with board.placed(r, c, mover):
            score = _after_placement(board, mover, depth + 1, not maximizing, alpha, beta, prune, stats)

        if maximizing:
            best = max(best, score)
            alpha = max(alpha, score)
        else:
            best = min(best, score)
            beta = min(beta, score)

        if not prune:
            continue
        # A forced win (or loss) cannot be improved on by the remaining siblings.
        if beta <= alpha or best == (inf if maximizing else -inf):
            if stats is not None:
                stats.cutoffs += 1
            break

    return best


def pick_next_move(
    board: Board,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Choose the computer's move.

    Candidates are tried in column order. Equal scores go to the later
    candidate. A candidate stuck at -inf never displaces the sentinel, so if
    every move loses the first legal one is returned.
    """
    candidates = board.valid_drops()
    if not candidates:
        raise InvalidMove("No valid moves: the board is full.")

    if stats is None:
        stats = SearchStats()

    fallback = candidates[0]
    best: Optional[SearchResult] = None
    best_score = -inf

    for r, c in candidates:
        with board.placed(r, c, Cell.COMPUTER):
            score = _after_placement(board, Cell.COMPUTER, 0, False, -inf, inf, prune, stats)

        if score != -inf and score >= best_score:
            best_score = score
            best = SearchResult(column=Move(c), row=r, score=score)

    if best is None:
        best = SearchResult(column=Move(fallback[1]), row=fallback[0], score=-inf)
    stats.score = best.score

    logger.debug(
        "picked column %d (row %d) score=%s nodes=%d leaves=%d cutoffs=%d prune=%s",
        best.column, best.row, best.score, stats.nodes, stats.leaves, stats.cutoffs, prune,
    )
    return best


def compute_computer_move(
    board: Board,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> Move:
    return pick_next_move(board, prune=prune, stats=stats).column
