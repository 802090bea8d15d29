from __future__ import annotations

from typing import Tuple

import numpy as np
import pandas as pd
from statsmodels.stats.proportion import proportion_confint

from ..config import CI_ALPHA, CI_METHOD, CODE_FIRST_IMPRESSION, GROUP_COLS, WEEK_COLS


def frequency_table(series: pd.Series) -> pd.DataFrame:
    """Counts and whole-number percentages of the non-null values in series.

    Rows are sorted by descending count, ties by label. Percentages are taken
    over non-null values only.
    """

    values = series.dropna()
    total = len(values)
    counts = values.value_counts().rename_axis("label").reset_index(name="count")
    counts["count"] = counts["count"].astype("int64")
    counts["percentage"] = (counts["count"] / total * 100).round().astype("int64") if total else 0
    counts = counts.sort_values(["count", "label"], ascending=[False, True], kind="mergesort")
    return counts.reset_index(drop=True)


def add_confidence_intervals(table: pd.DataFrame, alpha: float = CI_ALPHA, method: str = CI_METHOD) -> pd.DataFrame:
    """Append proportion and approximate CI columns to a frequency table."""

    out = table.copy()
    total = int(out["count"].sum())
    if total == 0:
        for col in ["proportion", "ci95_low", "ci95_high"]:
            out[col] = np.nan
        return out

    low, high = proportion_confint(out["count"].to_numpy(), total, alpha=alpha, method=method)
    out["proportion"] = (out["count"] / total).round(6)
    out["ci95_low"] = np.round(low, 6)
    out["ci95_high"] = np.round(high, 6)
    return out


def display_table(table: pd.DataFrame, label_name: str) -> pd.DataFrame:
    """Two-column (label, Count) table as shown beside a figure."""

    return table[["label", "count"]].rename(columns={"label": label_name, "count": "Count"})


def fate_distribution(labeled: pd.DataFrame) -> pd.DataFrame:
    return frequency_table(labeled["fate"])


def first_impression_groups(labeled: pd.DataFrame) -> pd.DataFrame:
    """Per (show, season) count of week-1 first-impression roses and whether the group is kept."""

    has_r1 = labeled[WEEK_COLS[0]].eq(CODE_FIRST_IMPRESSION)
    audit = (
        has_r1.groupby([labeled[c] for c in GROUP_COLS], sort=False)
        .sum()
        .astype("int64")
        .rename("n_first_impression")
        .reset_index()
    )
    audit["retained"] = audit["n_first_impression"].eq(1)
    return audit


def first_impression_recipients(labeled: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Recipients of the sole week-1 first-impression rose of their season.

    Seasons with zero or several first-impression roses are dropped entirely.
    Returns (recipients, per-group audit).
    """

    audit = first_impression_groups(labeled)
    kept = audit.loc[audit["retained"], GROUP_COLS]
    recipients = labeled.loc[labeled[WEEK_COLS[0]].eq(CODE_FIRST_IMPRESSION)]
    recipients = recipients.merge(kept, on=GROUP_COLS, how="inner")
    return recipients.reset_index(drop=True), audit


def first_impression_outcomes(labeled: pd.DataFrame) -> pd.DataFrame:
    recipients, _audit = first_impression_recipients(labeled)
    return frequency_table(recipients["place"])
