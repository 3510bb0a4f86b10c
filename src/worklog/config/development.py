import os

from .base import BREAK_LIMIT_MINUTES, LOG_FILE, TIMEZONE, build_database_url

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DATABASE_URL = build_database_url()

DEBUG = True
SQL_ECHO = bool(int(os.getenv("SQL_ECHO", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will create missing tables on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
