from __future__ import annotations

import importlib

from dotenv import load_dotenv

from worklog.config import get_settings_module
from worklog.database.bootstrap import create_schema, ensure_database_exists, list_tables
from worklog.database.connection import Database


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    ensure_database_exists(settings.DATABASE_URL)
    database = Database(settings.DATABASE_URL)
    try:
        create_schema(database)
        tables = list_tables(database)
        print(
            "OK: Created schema -> "
            f"{database.engine.url.render_as_string(hide_password=True)} (tables={len(tables)})"
        )
    finally:
        database.close()


if __name__ == "__main__":
    main()
