import csv
from pathlib import Path

import pandas as pd

from roses.config import N_WEEKS, WEEK_COLS


def weeks(*codes):
    """Pad codes out to a full season of week cells."""
    codes = list(codes)
    return codes + [""] * (N_WEEKS - len(codes))


# Four synthetic seasons:
#   Bachelorette 1 - one first-impression rose, given to the winner
#   Bachelor 2     - two first-impression roses (excluded from Figure 2)
#   Bachelor 3     - no first-impression rose; one contestant without any terminal code
#   Bachelor 4     - one first-impression rose, given to the runner-up
SYNTHETIC_ROWS = [
    ("Bachelorette", 1, "1_ANNA_A", weeks("R1", "R", "R", "R", "R", "R", "R", "R", "R", "W")),
    ("Bachelorette", 1, "1_BETH_B", weeks("R", "R", "R", "R", "R", "R", "R", "R", "R", "E")),
    ("Bachelorette", 1, "1_CARA_C", weeks("R", "R", "ED")),
    ("Bachelorette", 1, "1_DANA_D", weeks("E")),
    ("Bachelorette", 1, "1_ELLA_E", weeks("R", "R", "R", "R", "EQ")),
    ("Bachelorette", 1, "1_FAYE_F", weeks("R", "R", "R", "R", "R", "R", "R", "EU")),
    ("Bachelor", 2, "2_GREG_G", weeks("R1", "R", "R", "W")),
    ("Bachelor", 2, "2_HANK_H", weeks("R1", "E")),
    ("Bachelor", 2, "2_IVAN_I", weeks("E")),
    ("Bachelor", 3, "3_JACK_J", weeks("R", "R", "W")),
    ("Bachelor", 3, "3_KYLE_K", weeks("R", "EF")),
    ("Bachelor", 3, "3_LUKE_L", weeks()),
    ("Bachelor", 4, "4_MARK_M", weeks("R", "R", "W")),
    ("Bachelor", 4, "4_NICK_N", weeks("R1", "R", "E")),
    ("Bachelor", 4, "4_OWEN_O", weeks("E")),
]


def write_contestants_csv(path: Path, rows, sep: str = "-", sentinel_after: int = 3) -> Path:
    """Write rows in the published layout, with an embedded header row and extra DATES columns."""

    header = ["SHOW", "SEASON", "CONTESTANT"] + [f"ELIMINATION{sep}{i}" for i in range(1, N_WEEKS + 1)]
    header += [f"DATES{sep}{i}" for i in range(1, N_WEEKS + 1)]
    sentinel = ["SHOW", "SEASON", "ID"] + [str(i) for i in range(1, N_WEEKS + 1)] * 2

    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(header)
        for i, (show, season, contestant, codes) in enumerate(rows):
            if i == sentinel_after:
                writer.writerow(sentinel)
            writer.writerow([show, season, contestant] + list(codes) + [""] * N_WEEKS)
    return path


def contestants_frame(rows) -> pd.DataFrame:
    records = []
    for show, season, contestant, codes in rows:
        record = {"show": show, "season": season, "contestant": contestant}
        record.update(dict(zip(WEEK_COLS, codes)))
        records.append(record)
    df = pd.DataFrame(records)
    df["season"] = df["season"].astype("int64")
    return df
