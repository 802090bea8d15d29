from __future__ import annotations

import argparse
import os
import platform
import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path

_mpl_cache_dir = Path(tempfile.gettempdir()) / "matplotlib"
_mpl_cache_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("MPLCONFIGDIR", str(_mpl_cache_dir))

import pandas as pd
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from roses.config import CI_ALPHA, CI_METHOD, LABELED_FILE, OUTPUTS_DIR, REQUIRED_COLUMNS  # noqa: E402
from roses.data.build import LABEL_COLS  # noqa: E402
from roses.reporting.figures import bubble_chart, save_figure  # noqa: E402
from roses.reporting.summary import (  # noqa: E402
    add_confidence_intervals,
    display_table,
    fate_distribution,
    first_impression_recipients,
    frequency_table,
)
from roses.utils.logging import package_versions, write_json  # noqa: E402


def _write_figure_outputs(table: pd.DataFrame, label_name: str, stem: str, title: str, outdir: Path) -> None:
    tables_dir = outdir / "tables"
    figures_dir = outdir / "figures"
    tables_dir.mkdir(parents=True, exist_ok=True)

    shown = display_table(table, label_name)
    shown.to_csv(tables_dir / f"{stem}_counts.csv", index=False)
    add_confidence_intervals(table).to_csv(tables_dir / f"{stem}_detail.csv", index=False)

    fig = bubble_chart(table, title=title, xlabel=label_name)
    save_figure(fig, figures_dir / f"{stem}.png")
    plt.close(fig)

    print(title)
    print(shown.to_string(index=False))
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description="Fate distribution and first-impression-rose outcome figures.")
    parser.add_argument("--input-parquet", type=Path, default=LABELED_FILE, help="Labeled contestant table.")
    parser.add_argument("--outdir", type=Path, default=OUTPUTS_DIR, help="Output directory (default: outputs/).")
    args = parser.parse_args()

    if not args.input_parquet.exists():
        raise SystemExit(
            f"Labeled table not found: {args.input_parquet}. Run scripts/01_label_contestants.py first."
        )

    labeled = pd.read_parquet(args.input_parquet)
    missing_required = [c for c in REQUIRED_COLUMNS + LABEL_COLS if c not in labeled.columns]
    if missing_required:
        raise SystemExit(f"Missing required columns in labeled table: {missing_required}")

    outdir = args.outdir
    logs_dir = outdir / "logs"

    # Figure 1: how contestants left the show
    fates = fate_distribution(labeled)
    _write_figure_outputs(fates, "Fate", "fig1_fate_distribution", "How contestants leave the show", outdir)

    # Figure 2: where first-impression-rose recipients finish
    recipients, groups = first_impression_recipients(labeled)
    groups.to_csv(outdir / "tables" / "fig2_first_impression_groups.csv", index=False)
    places = frequency_table(recipients["place"])
    _write_figure_outputs(
        places,
        "Place",
        "fig2_first_impression_outcomes",
        "Where first-impression-rose recipients finish",
        outdir,
    )

    run_meta = {
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "argv": sys.argv,
        "python_version": sys.version,
        "platform": platform.platform(),
        "packages": package_versions(["pandas", "numpy", "pyarrow", "matplotlib", "statsmodels"]),
        "input_parquet": str(args.input_parquet),
        "outdir": str(outdir),
        "n_contestants": int(len(labeled)),
        "n_with_fate": int(fates["count"].sum()),
        "n_missing_fate": int(labeled["fate"].isna().sum()),
        "n_groups": int(len(groups)),
        "n_groups_single_first_impression": int(groups["retained"].sum()),
        "n_first_impression_recipients": int(len(recipients)),
        "ci_alpha": CI_ALPHA,
        "ci_method": CI_METHOD,
        "notes": [
            "Percentages are rounded per row and taken over contestants with a defined fate (Figure 1) "
            "or over first-impression recipients from seasons with exactly one such rose (Figure 2).",
            "Confidence intervals are Wilson score intervals on the row proportion.",
        ],
    }
    write_json(logs_dir / "figures_run_metadata.json", run_meta)

    print(f"Wrote figures and tables to {outdir}/")


if __name__ == "__main__":
    main()
