"""Connect 4 with a depth-limited minimax (alpha-beta) computer opponent."""

from c4minimax.ai.search import SearchResult, SearchStats, compute_computer_move, minimax, pick_next_move
from c4minimax.core.board import Board
from c4minimax.core.rules import Outcome, OutcomeKind, check_win
from c4minimax.core.scoring import evaluate
from c4minimax.errors import InvalidMove, OutOfRangeColumn
from c4minimax.game.actions import MoveResult, apply_move, new_game, undo_move
from c4minimax.types import Cell, Move

__all__ = [
    "Board",
    "Cell",
    "InvalidMove",
    "Move",
    "MoveResult",
    "OutOfRangeColumn",
    "Outcome",
    "OutcomeKind",
    "SearchResult",
    "SearchStats",
    "apply_move",
    "check_win",
    "compute_computer_move",
    "evaluate",
    "minimax",
    "new_game",
    "pick_next_move",
    "undo_move",
]
