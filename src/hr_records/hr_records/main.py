from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, redirect, url_for

from config import get_settings_module

from .common.formatting import format_amount
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees
from .timesheets.controller import register as register_timesheets
from .validation import field_error

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    A ready ``container`` (tests) skips the database bootstrap.
    """
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=PROJECT_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=PROJECT_ROOT / "database" / "seed.sql")
            app.logger.info("demo seed ready")

        upload_root = Path(getattr(settings, "UPLOAD_ROOT", "public"))
        if not upload_root.is_absolute():
            upload_root = PROJECT_ROOT / upload_root
        container = build_container(
            db_config=db_config,
            upload_root=upload_root,
            minimum_wage=getattr(settings, "MINIMUM_WAGE", 600),
        )

    app.jinja_env.filters["amount"] = format_amount
    app.jinja_env.globals["field_error"] = field_error

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("employees_list"))

    register_employees(app, container)
    register_timesheets(app, container)

    return app
