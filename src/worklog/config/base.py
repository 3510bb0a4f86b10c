import os
import urllib.parse


def build_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("DB_USER", "root")
    password = urllib.parse.quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "3306"))
    name = os.getenv("DB_NAME", "worklog_db")
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"


TIMEZONE = os.getenv("TIMEZONE", "Asia/Kolkata")

# Breaks longer than this raise a warning against the employee.
BREAK_LIMIT_MINUTES = int(os.getenv("BREAK_LIMIT_MINUTES", "20"))

LOG_FILE = os.getenv("LOG_FILE") or None
