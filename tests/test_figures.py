import os
import tempfile
from pathlib import Path

os.environ.setdefault("MPLCONFIGDIR", str(Path(tempfile.gettempdir()) / "matplotlib"))

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from roses.reporting.figures import bubble_chart, save_figure


def test_bubble_chart_follows_table_order(tmp_path: Path):
    table = pd.DataFrame({"label": ["Won", "Quit"], "count": [3, 1], "percentage": [75, 25]})
    fig = bubble_chart(table, title="t", xlabel="Fate")
    ax = fig.axes[0]

    assert [t.get_text() for t in ax.get_xticklabels()] == ["Won", "Quit"]
    assert sorted(t.get_text() for t in ax.texts) == ["25%", "75%"]

    out = tmp_path / "figures" / "bubble.png"
    save_figure(fig, out)
    plt.close(fig)
    assert out.exists()


def test_bubble_chart_handles_empty_table():
    table = pd.DataFrame({"label": [], "count": [], "percentage": []})
    fig = bubble_chart(table, title="empty", xlabel="Place")
    assert len(fig.axes[0].texts) == 0
    plt.close(fig)


def test_largest_bubble_gets_full_size():
    table = pd.DataFrame({"label": ["Won", "Quit"], "count": [4, 1], "percentage": [80, 20]})
    fig = bubble_chart(table, title="t", xlabel="Fate", max_bubble=400.0)
    sizes = fig.axes[0].collections[0].get_sizes().tolist()
    plt.close(fig)
    assert sizes == [400.0, 100.0]
