from __future__ import annotations
from typing import Optional

from c4minimax.errors import InvalidMove
from c4minimax.types import Move

QUIT_WORDS = {"q", "quit", "exit"}
YES_WORDS = {"y", "yes", ""}


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """Turn a 1-based column typed by the player into a Move, or None to quit."""
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise InvalidMove(f"Enter a column 1-{cols}, or q to quit.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise InvalidMove(f"Column must be between 1 and {cols}.")
    return Move(col)


def parse_yes_no(raw: str) -> bool:
    return raw.strip().lower() in YES_WORDS
