from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import DataSourceError, ValidationError
from .core.policy import ReconciliationPolicy
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(exc: ValidationError):
        return jsonify({"success": False, "message": str(exc)}), 400

    @app.errorhandler(DataSourceError)
    def _data_source_error(exc: DataSourceError):
        logger.exception("upstream data source failed", exc_info=exc)
        return jsonify({"success": False, "message": "Data source unavailable"}), 502


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            config = DBConfig.from_mapping(db_config)
            apply_schema(config)
            logger.info("schema ready (tables=%d)", len(list_tables(config)))
        container = build_container(db_config=db_config, policy=ReconciliationPolicy.from_settings(settings))

    _register_error_handlers(app)
    register_reports(app, container)
    register_payroll(app, container)

    return app
