from __future__ import annotations

import math

import pandas as pd
import pytest

from c4minimax_analysis.__main__ import main as analysis_main
from c4minimax_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results, prepare_results
from c4minimax_analysis.metrics.summarize import (
    SummaryConfig,
    disagreements,
    filter_rows,
    mode_summary,
    pruning_ratio_by_ply,
)
from c4minimax_analysis.plots.chart import plot_histograms, plot_metric_by_ply, plot_pruned_vs_exhaustive


def _frame() -> pd.DataFrame:
    return pd.DataFrame({
        "position": [0, 0, 1, 1, 2, 2],
        "ply": [2, 2, 2, 2, 6, 6],
        "pruned": ["True", "False", "True", "False", "True", "False"],
        "column": [3, 3, 4, 4, 1, 1],
        "score": [5.0, 5.0, float("inf"), float("inf"), -2.0, -2.0],
        "nodes": [500, 2800, 300, 2800, 120, 1600],
        "leaves": [400, 2401, 250, 2401, 90, 1300],
        "cutoffs": [60, 0, 30, 0, 20, 0],
        "time_ms": [20.0, 110.0, 12.0, 105.0, 5.0, 60.0],
    })


@pytest.fixture
def results() -> pd.DataFrame:
    return prepare_results(_frame())


def test_prepare_results_parses_pruned_flag(results):
    assert results["pruned"].dtype == bool
    assert results["pruned"].sum() == 3


def test_prepare_results_requires_core_columns():
    with pytest.raises(ValueError):
        prepare_results(pd.DataFrame({"position": [0], "nodes": [1]}))


def test_mode_summary(results):
    table = mode_summary(results)
    assert list(table["mode"]) == ["exhaustive", "alpha-beta"]
    assert list(table["runs"]) == [3, 3]
    row = table.set_index("mode").loc["alpha-beta"]
    assert row["nodes_mean"] == pytest.approx((500 + 300 + 120) / 3)
    assert row["nodes_median"] == 300


def test_pruning_ratio_by_ply(results):
    table = pruning_ratio_by_ply(results).set_index("ply")
    assert table.loc[2, "exhaustive"] == 2800
    assert table.loc[2, "alpha_beta"] == 400
    assert table.loc[6, "ratio"] == pytest.approx(120 / 1600)


def test_disagreements(results):
    assert disagreements(results).empty
    bad = results.copy()
    bad.loc[(bad["position"] == 1) & bad["pruned"], "column"] = 5
    assert list(disagreements(bad)["position"]) == [1]


def test_filter_rows_by_ply(results):
    out = filter_rows(results, SummaryConfig(min_ply=3))
    assert set(out["position"]) == {2}
    out = filter_rows(results, SummaryConfig(max_ply=2))
    assert set(out["position"]) == {0, 1}


def test_load_round_trip(tmp_path, results):
    path = tmp_path / "bench_results_20260101_000000.csv"
    _frame().to_csv(path, index=False)
    (tmp_path / "bench_results_20250101_000000.csv").write_text("position,pruned,nodes\n")

    assert load_latest_from_dir(tmp_path) == path
    loaded = load_results(LoadSpec(csv_path=path))
    assert loaded["pruned"].tolist() == results["pruned"].tolist()
    assert math.isinf(loaded["score"].iloc[2])


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))
    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path)


def test_plots_are_written(tmp_path, results):
    written = plot_histograms(results, tmp_path, ["nodes", "time_ms", "missing"], show=False)
    assert [p.name for p in written] == ["hist_nodes.png", "hist_time_ms.png"]
    assert plot_metric_by_ply(results, tmp_path, "nodes", show=False).exists()
    assert plot_pruned_vs_exhaustive(results, tmp_path, "nodes", show=False).exists()


def test_cli_end_to_end(tmp_path, capsys):
    csv_path = tmp_path / "bench.csv"
    _frame().to_csv(csv_path, index=False)
    figures = tmp_path / "figures"

    code = analysis_main(["analyze", "--csv", str(csv_path), "--outdir", str(figures)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Search modes" in out
    assert (figures / "nodes_by_ply.png").exists()


def test_cli_unknown_command(capsys):
    assert analysis_main(["frobnicate"]) == 2
    assert "Usage" in capsys.readouterr().out
