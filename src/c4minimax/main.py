from __future__ import annotations

import argparse
import logging
import time

from c4minimax.ai.minimax_agent import MinimaxAgent
from c4minimax.game.actions import new_game
from c4minimax.game.controller import run_game
from c4minimax.ui.human import HumanAgent
from c4minimax.ui.prompts import parse_yes_no


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="c4minimax", description="Play Connect 4 against a minimax AI.")
    ap.add_argument("--mode", choices=["ai", "human"], default=None, help="Skip the menu: 'ai' (vs computer) or 'human' (two players)")
    ap.add_argument("--no-thinking", action="store_true", help="Do not pause before the computer's move")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG shows search stats)")
    return ap


def _pick_mode() -> str:
    print("Select mode:")
    print("1) Human vs AI (minimax, alpha-beta)")
    print("2) Human vs Human")

    choice = input("Choice: ").strip()
    if choice == "2":
        return "human"
    if choice != "1":
        print("\nInvalid choice. Defaulting to Human vs AI.\n")
    return "ai"


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    mode = args.mode or _pick_mode()
    p1 = HumanAgent(name="Human")
    p2 = MinimaxAgent() if mode == "ai" else HumanAgent(name="Human 2")

    print(f"\nStarting game: {p1.name} vs {p2.name}")
    time.sleep(1)

    board = new_game()
    while True:
        state = run_game(p1, p2, show_thinking=not args.no_thinking, board=board)
        if not state.outcome.is_over:
            return 0
        if not parse_yes_no(input("Play again? [Y/n] ")):
            return 0


if __name__ == "__main__":
    raise SystemExit(main())
