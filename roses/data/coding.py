from __future__ import annotations

import re
from typing import Dict, Iterable, List

import pandas as pd

from ..errors import InputError


_NORMALIZE_RE = re.compile(r"[^0-9a-zA-Z]+")


def _normalize_name(name: str) -> str:
    return _NORMALIZE_RE.sub("_", name).strip("_").lower()


def normalize_column_names(df: pd.DataFrame) -> Dict[str, str]:
    """Return a normalized-name -> exact-name mapping for df columns.

    This does not modify the DataFrame. Published copies of the dataset use
    ``ELIMINATION-1`` while dataframe exports write ``ELIMINATION.1``; both
    normalize to ``elimination_1``.
    """

    mapping: Dict[str, str] = {}
    collisions: Dict[str, list[str]] = {}

    for col in df.columns.astype(str).tolist():
        norm = _normalize_name(col)
        if norm in mapping and mapping[norm] != col:
            collisions.setdefault(norm, sorted({mapping[norm], col}))
        mapping[norm] = col

    if collisions:
        raise InputError(f"Normalized column name collisions: {collisions}")

    return mapping


def clean_week_codes(series: pd.Series) -> pd.Series:
    """Strip status codes and map missing cells to the empty string."""

    return series.fillna("").astype(str).str.strip()


def unexpected_codes(df: pd.DataFrame, week_cols: Iterable[str], known: Iterable[str]) -> List[str]:
    """Sorted non-empty codes in week_cols that are not in known."""

    allowed = set(known) | {""}
    seen = set()
    for col in week_cols:
        seen.update(df[col].unique().tolist())
    return sorted(str(v) for v in seen - allowed)
