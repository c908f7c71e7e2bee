from __future__ import annotations

import importlib
import logging
import os
from datetime import timedelta
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask, jsonify

from .container import Container, build_container
from .core.constants import API_PREFIX, DEFAULT_SESSION_HOURS
from .core.logging_config import setup_logging
from .common.web import register_error_handlers, register_readiness_gate, register_request_logging
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_user, list_tables
from .deductions.controller import register as register_deductions
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .salaries.controller import register as register_salaries
from .settings import get_settings_module
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

# Reachable without a session or a ready database.
_UNGATED_ENDPOINTS = {"health", "static"}


def _init_database(settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config)
        ensure_demo_user(db_config)
        logger.info("Demo seed ready")


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT", "text"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(
        hours=int(getattr(settings, "SESSION_HOURS", DEFAULT_SESSION_HOURS))
    )
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))

    if container is None:
        db_config = dict(getattr(settings, "DB_CONFIG"))
        logger.info(
            "Starting with settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        try:
            _init_database(settings, db_config)
        except mysql.connector.Error:
            # The readiness gate keeps answering 503 until the server is reachable.
            logger.exception("Database bootstrap failed")
        container = build_container(db_config=db_config)
        container.conn.ensure_ready()

    app.extensions["container"] = container

    register_error_handlers(app)
    register_readiness_gate(app, container.conn, exempt=_UNGATED_ENDPOINTS)
    register_request_logging(app)

    @app.route(f"{API_PREFIX}/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "database": "ready" if container.conn.is_ready else "initializing"})

    register_users(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_salaries(app, container)
    register_deductions(app, container)
    register_reports(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")))


if __name__ == "__main__":
    run()
