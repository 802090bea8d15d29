from __future__ import annotations

import warnings
from pathlib import Path
from typing import Optional

import pandas as pd

from ..config import (
    CONTESTANT_COL,
    GROUP_COLS,
    HEADER_SENTINEL,
    KNOWN_CODES,
    REQUIRED_COLUMNS,
    SEASON_COL,
    SHOW_COL,
    SHOWS,
    WEEK_COLS,
)
from ..errors import DataQualityWarning, InputError
from .coding import clean_week_codes, normalize_column_names, unexpected_codes
from .validate import assert_required_columns, assert_unique_within_groups


def read_contestants_csv(path: Path, nrows: Optional[int] = None) -> pd.DataFrame:
    """Read the raw file as strings, without any cleaning."""

    path = Path(path)
    if not path.exists():
        raise InputError(f"Input file not found: {path}")
    try:
        return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8", nrows=nrows)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise InputError(f"Could not read {path}: {exc}") from exc


def _parse_seasons(series: pd.Series) -> pd.Series:
    parsed = pd.to_numeric(series.str.strip(), errors="coerce")
    bad = series.loc[parsed.isna() | (parsed % 1 != 0)]
    if len(bad):
        raise InputError(f"Non-integer {SEASON_COL} values: {sorted(bad.unique().tolist())[:10]}")
    return parsed.astype("int64")


def tidy_contestants(df_raw: pd.DataFrame) -> pd.DataFrame:
    """Canonical contestant table from a raw frame.

    Columns are renamed to their normalized names, embedded header rows are
    dropped, and only the required columns are kept (in a fixed order).
    """

    mapping = normalize_column_names(df_raw)
    df = df_raw.rename(columns={exact: norm for norm, exact in mapping.items()})
    assert_required_columns(df, REQUIRED_COLUMNS)

    df = df[REQUIRED_COLUMNS].copy()
    df = df.loc[df[CONTESTANT_COL].astype(str).str.strip() != HEADER_SENTINEL].reset_index(drop=True)

    df[SHOW_COL] = df[SHOW_COL].astype(str).str.strip()
    unknown_shows = sorted(set(df[SHOW_COL].unique().tolist()) - set(SHOWS))
    if unknown_shows:
        raise InputError(f"Unexpected {SHOW_COL} values: {unknown_shows}; expected {SHOWS}")

    df[SEASON_COL] = _parse_seasons(df[SEASON_COL].astype(str))
    df[CONTESTANT_COL] = df[CONTESTANT_COL].astype(str).str.strip()
    assert_unique_within_groups(df, CONTESTANT_COL, GROUP_COLS)

    for col in WEEK_COLS:
        df[col] = clean_week_codes(df[col])

    unexpected = unexpected_codes(df, WEEK_COLS, KNOWN_CODES)
    if unexpected:
        warnings.warn(
            f"Unrecognized status codes in elimination columns: {unexpected}",
            DataQualityWarning,
            stacklevel=2,
        )

    return df


def load_contestants(path: Path, nrows: Optional[int] = None) -> pd.DataFrame:
    return tidy_contestants(read_contestants_csv(path, nrows=nrows))
