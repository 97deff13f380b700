from __future__ import annotations
import sys
import time
from typing import Optional, Iterable, Set

from c4minimax.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC, CLEAR_SCREEN, USE_COLOR
from c4minimax.core.board import Board
from c4minimax.types import Cell, Coord, Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

# Player 1 plays red, player 2 yellow
_PIECES = {
    Cell.EMPTY: ("·", FG_GRAY),
    Cell.HUMAN: ("X", FG_RED),
    Cell.COMPUTER: ("O", FG_YELLOW),
}


def c(s: str, code: str) -> str:
    if not USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def player_label(player: Player) -> str:
    glyph, color = _PIECES[player]
    return f"Player {int(player)} ({c(glyph, color)})"


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()
    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]

    for r in range(board.rows):
        parts = []
        for col in range(board.cols):
            glyph, color = _PIECES[board.grid[r][col]]
            parts.append(c(glyph, color + (REVERSE if (r, col) in hl else "")))
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()
    print(c("CONNECT 4", BOLD))
    print(c(status, FG_CYAN) if status else "")
    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))


def ai_thinking(label: str = "AI is thinking") -> None:
    """Short spinner so the computer's reply is not instant."""
    if AI_THINK_DELAY_SEC <= 0:
        return
    if not AI_THINKING_SPINNER:
        time.sleep(AI_THINK_DELAY_SEC)
        return

    frames = "|/-\\"
    deadline = time.monotonic() + AI_THINK_DELAY_SEC
    i = 0
    while time.monotonic() < deadline:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + " " * (len(label) + 10) + "\r")
    sys.stdout.flush()
