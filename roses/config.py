from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
RAW_DIR = DATA_DIR / "raw"
PROCESSED_DIR = DATA_DIR / "processed"

OUTPUTS_DIR = PROJECT_ROOT / "outputs"
FIGURES_DIR = OUTPUTS_DIR / "figures"
TABLES_DIR = OUTPUTS_DIR / "tables"
LOGS_DIR = OUTPUTS_DIR / "logs"

RAW_FILE = RAW_DIR / "bachelorette.csv"
LABELED_FILE = PROCESSED_DIR / "contestants_labeled.parquet"

# Dataset identifier (used in outputs/ metadata)
DATASET_VERSION = "bachelor_bachelorette_v1"

# Input schema (normalized column names; see roses.data.coding.normalize_column_names)
SHOW_COL = "show"
SEASON_COL = "season"
CONTESTANT_COL = "contestant"
N_WEEKS = 10
WEEK_COLS = [f"elimination_{i}" for i in range(1, N_WEEKS + 1)]
REQUIRED_COLUMNS = [SHOW_COL, SEASON_COL, CONTESTANT_COL] + WEEK_COLS
GROUP_COLS = [SHOW_COL, SEASON_COL]

SHOWS = ["Bachelor", "Bachelorette"]

# Embedded header rows repeat the column labels; "ID" sits in CONTESTANT.
HEADER_SENTINEL = "ID"

# Status codes
CODE_ROSE = "R"
CODE_FIRST_IMPRESSION = "R1"
CODE_ELIMINATED = "E"
CODE_ELIMINATED_DATE = "ED"
CODE_ELIMINATED_UNSCHEDULED = "EU"
CODE_QUIT = "EQ"
CODE_FIRED = "EF"
CODE_WIN = "W"

KNOWN_CODES = [
    CODE_ROSE,
    CODE_FIRST_IMPRESSION,
    CODE_ELIMINATED,
    CODE_ELIMINATED_DATE,
    CODE_ELIMINATED_UNSCHEDULED,
    CODE_QUIT,
    CODE_FIRED,
    CODE_WIN,
]
TERMINAL_CODES = [
    CODE_ELIMINATED,
    CODE_ELIMINATED_DATE,
    CODE_ELIMINATED_UNSCHEDULED,
    CODE_FIRED,
    CODE_QUIT,
    CODE_WIN,
]

# Winners are treated as surviving one week past the last recorded week.
WINNER_ELIMINATION_INDEX = N_WEEKS + 1

# Fate labels
FATE_WEEK1_CEREMONY = "Eliminated in week 1 rose ceremony"
FATE_LATER_CEREMONY = "Eliminated in weeks 2+ rose ceremony"
FATE_DATE = "Eliminated on a date"
FATE_UNSCHEDULED = "Eliminated at an unscheduled time"
FATE_FIRED = "Fired by production"
FATE_QUIT = "Quit"
FATE_WON = "Won"

# Place labels, indexed by ranking (1-based); anything past the list is the last bucket.
PLACE_LABELS = ["Won", "Runners-up", "Third place", "Fourth place"]
PLACE_OTHER = "Fifth place and below"

# Frozen reporting protocol
CI_ALPHA = 0.05
CI_METHOD = "wilson"
FIGURE_DPI = 300
