import os

from .base import BREAK_LIMIT_MINUTES, LOG_FILE, TIMEZONE, build_database_url

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATABASE_URL = build_database_url()

DEBUG = False
SQL_ECHO = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
