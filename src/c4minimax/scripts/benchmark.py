from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from c4minimax.ai.random_agent import RandomAgent
from c4minimax.ai.search import SearchStats, pick_next_move
from c4minimax.core.board import Board
from c4minimax.game.actions import apply_move, new_game
from c4minimax.game.state import GameState
from c4minimax.types import other

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "position", "ply", "pruned",
    "column", "score",
    "nodes", "leaves", "cutoffs", "time_ms",
]


@dataclass(frozen=True)
class BenchConfig:
    positions: int = 50
    min_ply: int = 0
    max_ply: int = 16
    seed: int = 0


def random_position(rng: random.Random, plies: int) -> Tuple[Board, int]:
    """
    Play up to `plies` random moves from an empty board, stopping early rather
    than reaching a finished game. Returns the board and the plies played.
    """
    state = GameState(board=new_game())
    agent = RandomAgent(rng=rng)

    played = 0
    while played < plies:
        move = agent.choose_move(state)
        row = state.board.drop_target(move)
        result = apply_move(state.board, move, state.current)
        if result.outcome.is_over:
            state.board.clear(row, move)
            break
        state.current = other(state.current)
        played += 1
    return state.board, played


def generate_positions(cfg: BenchConfig) -> Iterator[Tuple[int, Board, int]]:
    for i in range(cfg.positions):
        rng = random.Random(cfg.seed + i)
        board, ply = random_position(rng, rng.randint(cfg.min_ply, cfg.max_ply))
        yield i, board, ply


def bench_position(position: int, board: Board, ply: int) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for pruned in (True, False):
        stats = SearchStats()
        start = time.perf_counter()
        result = pick_next_move(board, prune=pruned, stats=stats)
        elapsed = time.perf_counter() - start
        rows.append({
            "position": position,
            "ply": ply,
            "pruned": pruned,
            "column": int(result.column),
            "score": result.score,
            "nodes": stats.nodes,
            "leaves": stats.leaves,
            "cutoffs": stats.cutoffs,
            "time_ms": round(elapsed * 1000, 3),
        })

    if rows[0]["score"] != rows[1]["score"] or rows[0]["column"] != rows[1]["column"]:
        raise RuntimeError(
            f"Position {position}: pruned search chose {rows[0]['column']} ({rows[0]['score']}), "
            f"exhaustive chose {rows[1]['column']} ({rows[1]['score']})."
        )
    return rows


def run_benchmark(cfg: BenchConfig) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for position, board, ply in generate_positions(cfg):
        before = board.to_rows()
        rows.extend(bench_position(position, board, ply))
        if board.to_rows() != before:
            raise RuntimeError(f"Position {position}: search left the board modified.")
        logger.info(
            "position %d (ply %d): pruned nodes=%s exhaustive nodes=%s",
            position, ply, rows[-2]["nodes"], rows[-1]["nodes"],
        )
    return rows


def write_csv(rows: List[Dict[str, object]], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        w.writerows(rows)
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="c4minimax-bench",
        description="Compare alpha-beta and exhaustive minimax on random positions.",
    )
    ap.add_argument("--positions", type=int, default=50, help="Number of random positions to search")
    ap.add_argument("--min-ply", type=int, default=0, help="Fewest random moves played before searching")
    ap.add_argument("--max-ply", type=int, default=16, help="Most random moves played before searching")
    ap.add_argument("--seed", type=int, default=0, help="Base seed; position i uses seed + i")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where bench_results_*.csv is written")
    ap.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.min_ply < 0 or args.max_ply < args.min_ply:
        raise SystemExit("--min-ply must be >= 0 and <= --max-ply")

    cfg = BenchConfig(
        positions=args.positions,
        min_ply=args.min_ply,
        max_ply=args.max_ply,
        seed=args.seed,
    )
    rows = run_benchmark(cfg)

    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = write_csv(rows, Path(args.results_dir) / f"bench_results_{ts}.csv")
    print(f"Searched {cfg.positions} positions ({len(rows)} runs).")
    print(f"Wrote CSV: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
