from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import (
    SummaryConfig,
    disagreements,
    filter_rows,
    mode_summary,
    numeric_summary,
    pruning_ratio_by_ply,
)
from ..plots.chart import plot_histograms, plot_metric_by_ply, plot_pruned_vs_exhaustive


DEFAULT_NUMERIC_PLOTS = [
    "nodes",
    "leaves",
    "cutoffs",
    "time_ms",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze c4minimax search benchmark CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing bench_results_*.csv")
    ap.add_argument("--pattern", type=str, default="bench_results_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")

    ap.add_argument("--metric", type=str, default="nodes", choices=["nodes", "leaves", "cutoffs", "time_ms"], help="Counter compared per ply")
    ap.add_argument("--min-ply", type=int, default=0, help="Ignore positions with fewer plies played")
    ap.add_argument("--max-ply", type=int, default=None, help="Ignore positions with more plies played")

    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    cfg = SummaryConfig(metric=args.metric, min_ply=args.min_ply, max_ply=args.max_ply)
    df = filter_rows(load_results(LoadSpec(csv_path=csv_path)), cfg)

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Positions: {df['position'].nunique():,}")

    print("\n=== Search modes ===")
    print(mode_summary(df).to_string(index=False))

    print(f"\n=== Mean {cfg.metric} by ply ===")
    print(pruning_ratio_by_ply(df, cfg.metric).to_string(index=False))

    bad = disagreements(df)
    if not bad.empty:
        print(f"\n!!! {len(bad)} positions where pruning changed the result:")
        print(bad.to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0 if bad.empty else 1

    plot_histograms(df, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)
    plot_metric_by_ply(df, outdir, cfg.metric, show=args.show)
    plot_pruned_vs_exhaustive(df, outdir, cfg.metric, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0 if bad.empty else 1


if __name__ == "__main__":
    raise SystemExit(main())
