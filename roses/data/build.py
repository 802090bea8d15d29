from __future__ import annotations

import warnings
from typing import List, Tuple

import numpy as np
import pandas as pd

from ..config import GROUP_COLS, REQUIRED_COLUMNS, WEEK_COLS
from ..errors import DataQualityWarning
from .labels import classify_fate, elimination_index, place_for_ranking
from .validate import assert_required_columns

LABEL_COLS = ["fate", "elimination_index", "ranking", "place"]


def _rank_order(index_values: pd.Series) -> np.ndarray:
    """Positions sorted by descending elimination index, nulls last, ties by input order."""

    key = np.where(index_values.isna(), np.inf, -index_values.astype("float64").fillna(0).to_numpy())
    return np.lexsort((np.arange(len(key)), key))


def label_group(group: pd.DataFrame) -> pd.DataFrame:
    """Labeled copy of one (show, season) group, ordered by ranking."""

    weeks = [tuple(row) for row in group[WEEK_COLS].itertuples(index=False, name=None)]
    fates = [classify_fate(w) for w in weeks]
    indices = [elimination_index(w, f) for w, f in zip(weeks, fates)]

    out = group.reset_index(drop=True).copy()
    out["fate"] = pd.Series(fates, dtype="object")
    out["elimination_index"] = pd.array(indices, dtype="Int64")

    out = out.iloc[_rank_order(out["elimination_index"])].reset_index(drop=True)
    out["ranking"] = np.arange(1, len(out) + 1, dtype="int64")
    out["place"] = out["ranking"].map(place_for_ranking)
    return out


def build_labeled_table(df: pd.DataFrame) -> Tuple[pd.DataFrame, dict]:
    """Label every contestant, group by group, and concatenate the results.

    Returns the labeled table and a decisions dict describing the labeling run.
    """

    assert_required_columns(df, REQUIRED_COLUMNS)

    parts: List[pd.DataFrame] = [label_group(g) for _, g in df.groupby(GROUP_COLS, sort=False)]
    if parts:
        labeled = pd.concat(parts, ignore_index=True)
    else:
        labeled = df.reindex(columns=list(df.columns) + LABEL_COLS).iloc[0:0].copy()

    missing_fate = labeled.loc[labeled["fate"].isna(), GROUP_COLS + ["contestant"]]
    if len(missing_fate):
        examples = missing_fate.head(5).to_dict(orient="records")
        warnings.warn(
            f"{len(missing_fate)} contestant(s) have no terminal status code; fate left undefined "
            f"and excluded from fate counts. Examples: {examples}",
            DataQualityWarning,
            stacklevel=2,
        )

    decisions = {
        "group_cols": list(GROUP_COLS),
        "n_rows": int(len(labeled)),
        "n_groups": int(len(parts)),
        "n_missing_fate": int(len(missing_fate)),
        "fate_counts": {str(k): int(v) for k, v in labeled["fate"].value_counts().sort_index().items()},
        "ranking_rule": "descending elimination_index; nulls last; ties by input order",
    }
    return labeled, decisions
