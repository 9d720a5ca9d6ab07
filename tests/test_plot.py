from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from pocket_table.viz.plot import plot_depth_distribution  # noqa: E402


def test_plot_depth_distribution():
    ax = plot_depth_distribution({0: 1, 1: 9, 2: 54})
    assert len(ax.patches) == 3
    assert ax.get_xlabel() == "moves to solve"
    assert "64" in ax.get_title()
    plt.close("all")
