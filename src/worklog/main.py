from __future__ import annotations

import atexit
import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .assignments.controller import register as register_assignments
from .breaks.controller import register as register_breaks
from .common.responses import fail, ok
from .common.logging_setup import setup_logging
from .config import get_settings_module
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import create_schema, ensure_database_exists, seed_demo_data
from .database.connection import Database
from .employees.controller import register as register_employees
from .issues.controller import register as register_issues
from .logs.controller import register as register_logs
from .submissions.controller import register as register_submissions
from .tags.controller import register as register_tags
from .warnings.controller import register as register_warnings

logger = logging.getLogger(__name__)


def _load_settings(overrides: Optional[dict]) -> dict[str, Any]:
    module = importlib.import_module(get_settings_module())
    settings = {name: getattr(module, name) for name in dir(module) if name.isupper()}
    settings.update(overrides or {})
    return settings


def _register_system_routes(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        if not container.database.ping():
            return fail("Database unavailable", 500)
        return ok({"status": "ok"})

    if app.config["DEBUG"]:

        @app.route("/api/debug/metrics", methods=["GET"], endpoint="debug_metrics")
        def debug_metrics():
            return ok(container.perf.summary())


def create_app(overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    settings = _load_settings(overrides)

    setup_logging(
        settings.get("LOG_LEVEL", "INFO"),
        settings.get("LOG_FILE"),
        sql_echo=bool(settings.get("SQL_ECHO", False)),
    )

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.json.sort_keys = False

    database_url = settings["DATABASE_URL"]
    if settings.get("AUTO_INIT_DB"):
        ensure_database_exists(database_url)
    database = Database(database_url)
    logger.info("Using database %s", database.engine.url.render_as_string(hide_password=True))

    if settings.get("AUTO_INIT_DB"):
        create_schema(database)
    if settings.get("AUTO_SEED_DB"):
        seed_demo_data(database)

    container = build_container(
        database=database,
        tz_name=settings.get("TIMEZONE", "Asia/Kolkata"),
        break_limit_minutes=int(settings.get("BREAK_LIMIT_MINUTES", 20)),
    )
    app.extensions["worklog"] = container

    register_employees(app, container)
    register_tags(app, container)
    register_assignments(app, container)
    register_breaks(app, container)
    register_logs(app, container)
    register_submissions(app, container)
    register_warnings(app, container)
    register_issues(app, container)
    register_dashboard(app, container)
    _register_system_routes(app, container)

    if not app.config["TESTING"]:
        atexit.register(_shutdown, container, app.config["DEBUG"])

    return app


def _shutdown(container: Container, debug: bool) -> None:
    if debug:
        container.perf.log_summary()
    container.database.close()
