from .chart import (
    plot_histograms,
    plot_metric_by_ply,
    plot_pruned_vs_exhaustive,
)

__all__ = [
    "plot_histograms",
    "plot_metric_by_ply",
    "plot_pruned_vs_exhaustive",
]
