from __future__ import annotations

from collections.abc import Mapping

import matplotlib.pyplot as plt


def plot_depth_distribution(depth_counts: Mapping[int, int], *, ax=None, title: str | None = None):
    """Bar chart of how many configurations need each solution length."""
    if ax is None:
        fig = plt.figure(figsize=(7, 4.2))
        ax = fig.add_subplot(111)

    depths = sorted(depth_counts)
    counts = [depth_counts[d] for d in depths]

    bars = ax.bar(depths, counts, color="tab:blue")
    ax.bar_label(bars, labels=[f"{c:,}" for c in counts], fontsize=7, rotation=90, padding=2)

    ax.set_xlabel("moves to solve")
    ax.set_ylabel("configurations")
    ax.set_xticks(depths)
    ax.set_title(title or f"U/F/R pocket cube: {sum(counts):,} configurations")
    return ax
