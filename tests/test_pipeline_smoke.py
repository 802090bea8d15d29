import json
import subprocess
import sys
from pathlib import Path

import pandas as pd

from synthetic_data import SYNTHETIC_ROWS, write_contestants_csv


def test_label_and_figures_smoke(tmp_path: Path):
    repo_root = Path(__file__).resolve().parents[1]
    raw_csv = write_contestants_csv(tmp_path / "bachelorette.csv", SYNTHETIC_ROWS)

    labeled_parquet = tmp_path / "contestants_labeled.parquet"
    decisions_json = tmp_path / "labeling_decisions.json"
    outdir = tmp_path / "outputs"

    label_cmd = [
        sys.executable,
        str(repo_root / "scripts" / "01_label_contestants.py"),
        "--input",
        str(raw_csv),
        "--out-parquet",
        str(labeled_parquet),
        "--audit-csv",
        str(tmp_path / "labeling_audit.csv"),
        "--missing-fate-csv",
        str(tmp_path / "missing_fate_contestants.csv"),
        "--decisions-json",
        str(decisions_json),
    ]
    subprocess.run(label_cmd, cwd=repo_root, check=True)

    labeled = pd.read_parquet(labeled_parquet)
    assert len(labeled) == len(SYNTHETIC_ROWS)
    assert {"fate", "elimination_index", "ranking", "place"} <= set(labeled.columns)

    missing = pd.read_csv(tmp_path / "missing_fate_contestants.csv")
    assert missing["contestant"].tolist() == ["3_LUKE_L"]

    payload = json.loads(decisions_json.read_text(encoding="utf-8"))
    assert payload["n_missing_fate"] == 1
    assert payload["fate_priority"][0] == "Eliminated in week 1 rose ceremony"
    assert len(payload["data_quality_warnings"]) == 1

    figures_cmd = [
        sys.executable,
        str(repo_root / "scripts" / "02_figures.py"),
        "--input-parquet",
        str(labeled_parquet),
        "--outdir",
        str(outdir),
    ]
    subprocess.run(figures_cmd, cwd=repo_root, check=True)

    required_paths = [
        "figures/fig1_fate_distribution.png",
        "figures/fig2_first_impression_outcomes.png",
        "tables/fig1_fate_distribution_counts.csv",
        "tables/fig1_fate_distribution_detail.csv",
        "tables/fig2_first_impression_outcomes_counts.csv",
        "tables/fig2_first_impression_outcomes_detail.csv",
        "tables/fig2_first_impression_groups.csv",
        "logs/figures_run_metadata.json",
    ]
    for rel in required_paths:
        assert (outdir / rel).exists(), f"Missing expected figure artifact: {rel}"

    fates = pd.read_csv(outdir / "tables" / "fig1_fate_distribution_counts.csv")
    assert fates.columns.tolist() == ["Fate", "Count"]
    assert fates["Count"].sum() == len(SYNTHETIC_ROWS) - 1

    places = pd.read_csv(outdir / "tables" / "fig2_first_impression_outcomes_counts.csv")
    assert places.columns.tolist() == ["Place", "Count"]
    assert places["Count"].sum() == 2


def test_label_script_fails_on_missing_input(tmp_path: Path):
    repo_root = Path(__file__).resolve().parents[1]
    cmd = [
        sys.executable,
        str(repo_root / "scripts" / "01_label_contestants.py"),
        "--input",
        str(tmp_path / "missing.csv"),
        "--out-parquet",
        str(tmp_path / "out.parquet"),
    ]
    result = subprocess.run(cmd, cwd=repo_root, capture_output=True, text=True)
    assert result.returncode != 0
    assert "Input file not found" in result.stderr
    assert not (tmp_path / "out.parquet").exists()
