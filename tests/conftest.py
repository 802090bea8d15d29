from pathlib import Path

import pandas as pd
import pytest

from synthetic_data import SYNTHETIC_ROWS, contestants_frame, write_contestants_csv


@pytest.fixture
def synthetic_csv(tmp_path: Path) -> Path:
    return write_contestants_csv(tmp_path / "bachelorette.csv", SYNTHETIC_ROWS)


@pytest.fixture
def synthetic_frame() -> pd.DataFrame:
    return contestants_frame(SYNTHETIC_ROWS)
