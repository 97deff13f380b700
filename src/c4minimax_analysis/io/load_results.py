from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


DEFAULT_EXPECTED_COLS = [
    "position", "ply", "pruned",
    "column", "score",
    "nodes", "leaves", "cutoffs", "time_ms",
]

NUMERIC_COLS = ["position", "ply", "column", "score", "nodes", "leaves", "cutoffs", "time_ms"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def _coerce_bool(s: pd.Series) -> pd.Series:
    return s.astype(str).str.strip().str.lower().isin({"true", "1", "yes"})


def prepare_results(df: pd.DataFrame, expected_cols: Iterable[str] = DEFAULT_EXPECTED_COLS) -> pd.DataFrame:
    """Normalize a raw benchmark frame: trimmed headers, numeric columns, boolean `pruned`."""
    out = df.copy()
    out.columns = [str(c).strip() for c in out.columns]

    missing = [c for c in ("position", "pruned", "nodes") if c not in out.columns]
    if missing:
        raise ValueError(f"Results missing required columns {missing}. Columns: {list(out.columns)}")

    absent = set(expected_cols) - set(out.columns)
    if absent:
        # Older exports may lack optional counters
        for c in sorted(absent):
            out[c] = float("nan")

    out = _coerce_numeric(out, NUMERIC_COLS)
    out["pruned"] = _coerce_bool(out["pruned"])
    return out


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")
    return prepare_results(pd.read_csv(spec.csv_path), spec.expected_cols)


def load_latest_from_dir(results_dir: Path, pattern: str = "bench_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
