from __future__ import annotations

import importlib

from dotenv import load_dotenv

from worklog.config import get_settings_module
from worklog.database.bootstrap import seed_demo_data
from worklog.database.connection import Database


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    database = Database(settings.DATABASE_URL)
    try:
        seed_demo_data(database)
        print(f"OK: Seeded database -> {database.engine.url.render_as_string(hide_password=True)}")
    finally:
        database.close()


if __name__ == "__main__":
    main()
