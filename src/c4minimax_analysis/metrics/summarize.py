from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal["nodes", "leaves", "cutoffs", "time_ms"]

COUNTERS = ["nodes", "leaves", "cutoffs", "time_ms"]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "nodes"
    min_ply: int = 0
    max_ply: int | None = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()

    if cfg.min_ply > 0 or cfg.max_ply is not None:
        _require_cols(out, ["ply"])
        out = out[out["ply"].fillna(0) >= cfg.min_ply].copy()
        if cfg.max_ply is not None:
            out = out[out["ply"] <= cfg.max_ply].copy()

    return out


def mode_label(pruned: bool) -> str:
    return "alpha-beta" if pruned else "exhaustive"


def mode_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and median of every search counter, one row per search mode."""
    _require_cols(df, ["pruned"])
    cols = [c for c in COUNTERS if c in df.columns]

    out = df.groupby("pruned")[cols].agg(["mean", "median"])
    out.columns = [f"{c}_{stat}" for c, stat in out.columns]
    out = out.reset_index()
    out.insert(0, "mode", out.pop("pruned").map(mode_label))
    out.insert(1, "runs", df.groupby("pruned").size().to_numpy())
    return out


def pruning_ratio_by_ply(df: pd.DataFrame, metric: MetricKey = "nodes") -> pd.DataFrame:
    """
    Average `metric` per ply for both modes and the alpha-beta/exhaustive ratio.
    A ratio below 1 is work saved by pruning.
    """
    _require_cols(df, ["ply", "pruned", metric])

    table = df.pivot_table(index="ply", columns="pruned", values=metric, aggfunc="mean")
    table = table.rename(columns={True: "alpha_beta", False: "exhaustive"})
    for c in ("alpha_beta", "exhaustive"):
        if c not in table.columns:
            table[c] = float("nan")

    table["ratio"] = table["alpha_beta"] / table["exhaustive"]
    table.columns.name = None
    return table.reset_index()[["ply", "alpha_beta", "exhaustive", "ratio"]]


def disagreements(df: pd.DataFrame) -> pd.DataFrame:
    """Positions where the two modes chose a different column or score."""
    _require_cols(df, ["position", "pruned", "column", "score"])

    wide = df.pivot_table(index="position", columns="pruned", values=["column", "score"], aggfunc="first")
    if wide.empty or True not in wide["column"].columns or False not in wide["column"].columns:
        return pd.DataFrame(columns=["position"])

    differs = (wide[("column", True)] != wide[("column", False)]) | (wide[("score", True)] != wide[("score", False)])
    return pd.DataFrame({"position": wide.index[differs.to_numpy()]})


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
