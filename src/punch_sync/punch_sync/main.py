from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .settings import get_settings_module

from .container import Container, build_container
from .core.exceptions import RemoteError, ValidationError
from .core.logging import configure_logging
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"status": "error", "message": str(exc)}), 400

    @app.errorhandler(RemoteError)
    def handle_remote_error(exc: RemoteError):
        return jsonify({"status": "error", "message": exc.message}), 502


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ENDPOINT_URL"] = getattr(settings, "ENDPOINT_URL", "")

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    if not app.config["ENDPOINT_URL"] and container is None:
        logger.warning("PUNCH_SYNC_ENDPOINT_URL is not set; every remote call will fail until it is configured")
    logger.info("settings=%s endpoint=%s", settings_module, app.config["ENDPOINT_URL"] or "-")

    if container is None:
        container = build_container(
            endpoint_url=app.config["ENDPOINT_URL"],
            timeout=float(getattr(settings, "REQUEST_TIMEOUT", 30)),
        )
    app.extensions["punch_sync"] = container

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "service": "punch-sync"})

    _register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
