from __future__ import annotations

import logging
from dataclasses import dataclass

from c4minimax.core.board import Board
from c4minimax.core.rules import Outcome, outcome
from c4minimax.errors import InvalidMove
from c4minimax.types import Player, Move

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    row: int
    outcome: Outcome


def new_game() -> Board:
    return Board()


def apply_move(board: Board, move: Move, player: Player) -> MoveResult:
    """
    Drop `player`'s piece into column `move` and report where it landed and
    how the game stands. Raises InvalidMove (or OutOfRangeColumn) without
    touching the board when the move cannot be played.
    """
    row = board.drop_target(move)
    if row is None:
        raise InvalidMove(f"Column {int(move) + 1} is full.")

    board.place(row, move, player)
    result = MoveResult(row=row, outcome=outcome(board, last=player))
    logger.debug("%s -> (%d, %d): %s", player.name, row, int(move), result.outcome.kind.value)
    return result


def undo_move(board: Board, row: int, move: Move) -> None:
    board.clear(row, move)
