import platform
import sys

from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from roses.config import RAW_FILE, LABELED_FILE, LOGS_DIR
from roses.utils.logging import package_versions, write_json


def main() -> None:
    info = {
        "python_version": sys.version,
        "platform": platform.platform(),
        "packages": package_versions(["pandas", "numpy", "pyarrow", "matplotlib", "statsmodels"]),
        "raw_file": str(RAW_FILE),
        "raw_file_exists": RAW_FILE.exists(),
        "labeled_file_exists": LABELED_FILE.exists(),
    }
    write_json(LOGS_DIR / "environment_check.json", info)
    print("Wrote outputs/logs/environment_check.json")


if __name__ == "__main__":
    main()
