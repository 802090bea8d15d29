from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..config import FIGURE_DPI


def save_figure(fig, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=FIGURE_DPI, bbox_inches="tight")


def bubble_chart(table: pd.DataFrame, title: str, xlabel: str, max_bubble: float = 4000.0):
    """Bubble chart of a frequency table: category on x, count on y, area ~ count.

    Each bubble is labelled with its percentage. Category order follows the
    table's row order.
    """

    fig, ax = plt.subplots(figsize=(11, 6))
    x = np.arange(len(table))
    counts = table["count"].to_numpy(dtype=float)
    peak = counts.max() if len(counts) else 1.0
    sizes = counts / peak * max_bubble

    ax.scatter(x, counts, s=sizes, alpha=0.6, edgecolors="black", linewidths=0.5)
    for xi, yi, pct in zip(x, counts, table["percentage"].tolist()):
        ax.annotate(f"{pct}%", (xi, yi), ha="center", va="center", fontsize=9)

    ax.set_xticks(x)
    ax.set_xticklabels([str(v) for v in table["label"]])
    ax.tick_params(axis="x", rotation=30, labelsize=9)
    for tick in ax.get_xticklabels():
        tick.set_horizontalalignment("right")
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("Count")
    ax.set_xlim(-0.75, max(len(table) - 0.25, 0.75))
    ax.set_ylim(0, max(1.0, peak * 1.25))
    ax.grid(axis="y", alpha=0.3)
    fig.tight_layout()
    return fig
