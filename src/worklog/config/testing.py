from .base import BREAK_LIMIT_MINUTES, TIMEZONE

SECRET_KEY = "test-secret"

DATABASE_URL = "sqlite:///:memory:"

DEBUG = False
TESTING = True
SQL_ECHO = False
LOG_LEVEL = "WARNING"
LOG_FILE = None

AUTO_INIT_DB = True
AUTO_SEED_DB = False
