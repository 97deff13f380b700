from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt

from ..metrics.summarize import mode_label, pruning_ratio_by_ply


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    """One histogram per counter, alpha-beta and exhaustive runs overlaid."""
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    written: list[Path] = []

    for c in num_cols:
        fig = plt.figure()
        for pruned, group in df.groupby("pruned"):
            plt.hist(group[c].dropna(), bins=30, alpha=0.6, label=mode_label(bool(pruned)))
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")
        plt.legend()

        out = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if out is not None:
            written.append(out)
    return written


def plot_metric_by_ply(df: pd.DataFrame, outdir: Path, metric: str = "nodes", *, show: bool) -> Path | None:
    if metric not in df.columns or "ply" not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    table = pruning_ratio_by_ply(df, metric)  # type: ignore[arg-type]

    fig = plt.figure()
    plt.plot(table["ply"], table["exhaustive"], marker="o", label="exhaustive")
    plt.plot(table["ply"], table["alpha_beta"], marker="o", label="alpha-beta")
    plt.yscale("log")
    plt.title(f"Mean {metric} per search vs ply")
    plt.xlabel("plies played before search")
    plt.ylabel(metric)
    plt.legend()

    return _finish(fig, outdir, f"{metric}_by_ply.png", show=show)


def plot_pruned_vs_exhaustive(df: pd.DataFrame, outdir: Path, metric: str = "nodes", *, show: bool) -> Path | None:
    """Scatter of the same position searched both ways; points under the diagonal are savings."""
    if metric not in df.columns or "position" not in df.columns:
        return None

    wide = df.pivot_table(index="position", columns="pruned", values=metric, aggfunc="first")
    if True not in wide.columns or False not in wide.columns:
        return None

    fig = plt.figure()
    plt.scatter(wide[False], wide[True], alpha=0.6)
    hi = float(wide[False].max())
    plt.plot([0, hi], [0, hi], linestyle="--", color="gray")
    plt.title(f"{metric}: alpha-beta vs exhaustive")
    plt.xlabel(f"exhaustive {metric}")
    plt.ylabel(f"alpha-beta {metric}")

    return _finish(fig, outdir, f"scatter_{metric}_pruned_vs_exhaustive.png", show=show)
