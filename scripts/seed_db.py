from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from dotenv import load_dotenv

from time_titan.config import get_settings_module
from time_titan.database.bootstrap import apply_seed_sql
from time_titan.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_seed_sql(config, seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: Seeded database -> {config.user}@{config.host}:{config.port}/{config.database}")


if __name__ == "__main__":
    main()
