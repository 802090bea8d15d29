from typing import Iterable

from ..errors import InputError


def assert_required_columns(df, required: Iterable[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise InputError(f"Missing required columns: {missing}")


def assert_unique_within_groups(df, key: str, group_cols: Iterable[str]) -> None:
    group_cols = list(group_cols)
    dupes = df.loc[df.duplicated(subset=group_cols + [key], keep=False), group_cols + [key]]
    if len(dupes):
        examples = dupes.drop_duplicates().head(5).to_dict(orient="records")
        raise InputError(f"Duplicate {key} values within {group_cols} groups: {examples}")
