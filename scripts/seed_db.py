from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_records.hr_records.database.bootstrap import run_sql_file


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    count = run_sql_file(db_config, sql_path=REPO_ROOT / "database" / "seed.sql")
    print(f"Seeded {db_config.get('database')} with demo employees ({count} statements)")


if __name__ == "__main__":
    main()
