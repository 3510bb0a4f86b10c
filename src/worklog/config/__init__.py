import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "worklog.config.production"

    if env in {"test", "testing"}:
        return "worklog.config.testing"

    return "worklog.config.development"
