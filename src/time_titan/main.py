from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import DomainError, UpstreamError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .punches.controller import register as register_punches
from .teams.controller import register as register_teams

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SESSION_DAYS = 7
_SQL_DIR = Path(__file__).resolve().parents[2] / "database"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)
    # mysql-connector is chatty at DEBUG
    logging.getLogger("mysql.connector").setLevel(logging.WARNING)


def register_error_handlers(app: Flask) -> None:
    def _message(status: int, message: str):
        return jsonify({"message": message}), status

    @app.errorhandler(UpstreamError)
    def handle_upstream(e: UpstreamError):
        logger.exception("Upstream failure: %s", e)
        return _message(500, "Internal server error")

    @app.errorhandler(DomainError)
    def handle_domain(e: DomainError):
        if e.status_code >= 500:
            logger.exception("Unhandled domain error: %s", e)
            return _message(500, "Internal server error")
        return _message(e.status_code, str(e))

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return _message(e.code or 500, e.description or e.name)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unexpected error: %s", e)
        return _message(500, "Internal server error")


def _bootstrap_database(settings, db_config: dict, *, debug: bool) -> None:
    config = DBConfig.from_dict(db_config)
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(config, schema_path=_SQL_DIR / "schema.sql")
        if debug:
            logger.info("[time-titan] schema ready (tables=%s)", len(list_tables(config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(config, seed_path=_SQL_DIR / "seed.sql")
        if debug:
            logger.info("[time-titan] demo seed ready")


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    secret_key = getattr(settings, "SECRET_KEY", None)
    if not secret_key:
        raise RuntimeError(f"SECRET_KEY is not set for {settings_module}; sessions cannot be signed")
    app.secret_key = secret_key
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False
    app.permanent_session_lifetime = timedelta(days=SESSION_DAYS)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "[time-titan] settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        _bootstrap_database(settings, db_config, debug=app.config["DEBUG"])
        container = build_container(
            db_config=db_config,
            shift_minutes=int(getattr(settings, "SHIFT_MINUTES", 540)),
            on_time_cutoff=getattr(settings, "ON_TIME_CUTOFF", None),
            area_id=getattr(settings, "PUNCH_AREA_ID", None),
        )

    app.extensions["time_titan"] = container

    register_error_handlers(app)
    register_employees(app, container)
    register_punches(app, container)
    register_dashboard(app, container)
    register_teams(app, container)

    return app
