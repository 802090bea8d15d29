import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import warnings

import pandas as pd

from roses.config import (
    RAW_FILE,
    LABELED_FILE,
    TABLES_DIR,
    LOGS_DIR,
    DATASET_VERSION,
    HEADER_SENTINEL,
    KNOWN_CODES,
    TERMINAL_CODES,
    WINNER_ELIMINATION_INDEX,
)
from roses.data.build import build_labeled_table
from roses.data.ingest import read_contestants_csv, tidy_contestants
from roses.data.labels import FATE_ORDER
from roses.errors import DataQualityWarning, InputError
from roses.utils.logging import sha256_df, split_warnings, write_json


def main() -> None:
    parser = argparse.ArgumentParser(description="Load contestant records and derive fate/ranking/place labels.")
    parser.add_argument("--input", type=Path, default=RAW_FILE, help="Input CSV path.")
    parser.add_argument("--nrows", type=int, default=None, help="Optional: read only the first N rows (for tests).")
    parser.add_argument(
        "--out-parquet",
        type=Path,
        default=LABELED_FILE,
        help="Output parquet path for the labeled table.",
    )
    parser.add_argument(
        "--audit-csv",
        type=Path,
        default=TABLES_DIR / "labeling_audit.csv",
        help="Output audit CSV path.",
    )
    parser.add_argument(
        "--missing-fate-csv",
        type=Path,
        default=TABLES_DIR / "missing_fate_contestants.csv",
        help="Output CSV listing contestants with no terminal status code.",
    )
    parser.add_argument(
        "--decisions-json",
        type=Path,
        default=LOGS_DIR / "labeling_decisions.json",
        help="Output JSON file for labeling decisions.",
    )
    args = parser.parse_args()

    if args.nrows is not None and args.nrows <= 0:
        raise SystemExit("--nrows must be a positive integer.")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", DataQualityWarning)
        try:
            df_raw = read_contestants_csv(args.input, nrows=args.nrows)
            contestants = tidy_contestants(df_raw)
        except InputError as exc:
            raise SystemExit(str(exc)) from exc
        labeled, decisions = build_labeled_table(contestants)

    quality_warnings = split_warnings(caught, DataQualityWarning)
    for message in quality_warnings:
        print(f"DataQualityWarning: {message}")

    raw_rows = len(df_raw)
    content_hash = sha256_df(labeled)

    args.out_parquet.parent.mkdir(parents=True, exist_ok=True)
    labeled.to_parquet(args.out_parquet, index=False)

    missing = labeled.loc[labeled["fate"].isna()]
    args.missing_fate_csv.parent.mkdir(parents=True, exist_ok=True)
    missing.to_csv(args.missing_fate_csv, index=False)

    args.audit_csv.parent.mkdir(parents=True, exist_ok=True)
    audit = pd.DataFrame(
        [
            {
                "raw_rows": raw_rows,
                "header_rows_dropped": raw_rows - len(contestants),
                "labeled_rows": len(labeled),
                "groups": decisions["n_groups"],
                "missing_fate": decisions["n_missing_fate"],
                "content_hash_sha256": content_hash,
                "decisions_json": str(args.decisions_json),
            }
        ]
    )
    audit.to_csv(args.audit_csv, index=False)

    write_json(
        args.decisions_json,
        {
            **decisions,
            "dataset_version": DATASET_VERSION,
            "input_file": str(args.input),
            "header_sentinel": HEADER_SENTINEL,
            "known_codes": list(KNOWN_CODES),
            "terminal_codes": list(TERMINAL_CODES),
            "fate_priority": list(FATE_ORDER),
            "winner_elimination_index": WINNER_ELIMINATION_INDEX,
            "raw_rows": raw_rows,
            "data_quality_warnings": quality_warnings,
            "output_parquet": str(args.out_parquet),
            "content_hash_sha256": content_hash,
        },
    )

    print(f"Wrote {args.out_parquet}")
    print(f"Wrote {args.audit_csv}")
    print(f"Wrote {args.missing_fate_csv}")
    print(f"Wrote {args.decisions_json}")


if __name__ == "__main__":
    main()
