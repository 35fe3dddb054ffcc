"""
Database schema initialization script
-------------------------------------
Creates any missing tables for DATABASE_URL.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# allow running from a checkout without installing
sys.path.insert(0, str(PROJECT_ROOT))

from sqlalchemy import inspect  # noqa: E402

from tourism.core.config import get_settings  # noqa: E402
from tourism.db.init_db import init_db  # noqa: E402
from tourism.db.session import create_db_engine  # noqa: E402


def init_db_schema() -> None:
    settings = get_settings()
    if not settings.database_url:
        raise SystemExit("DATABASE_URL is not set")

    print("Initializing database schema...")
    engine = create_db_engine(settings.database_url)
    init_db(engine)

    print("\nTables:")
    for name in sorted(inspect(engine).get_table_names()):
        print(f"  - {name}")


if __name__ == "__main__":
    init_db_schema()
