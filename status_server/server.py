#!/usr/bin/env python3
"""
Status endpoints for the UX Audit Platform.
Serves the health check and the environment diagnostics report.
"""

import logging
import platform
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from flask import Flask, Response, abort, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from status_server.config import (
    ALLOWED_HEADERS,
    ALLOWED_METHODS,
    ERROR_MESSAGES,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    RUNTIME_NAME,
    SERVICE_NAME,
    SERVICE_VERSION,
    StatusConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z

    Sub-millisecond remainders round up, so the stamp is never earlier than ``now``.
    """
    now = now or datetime.now(timezone.utc)
    remainder = now.microsecond % 1000
    if remainder:
        now += timedelta(microseconds=1000 - remainder)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def health_payload(config: StatusConfig) -> Dict[str, Any]:
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "timestamp": utc_timestamp(),
        "version": SERVICE_VERSION,
        "environment": config.environment,
    }


def diagnostics_payload(config: StatusConfig) -> Dict[str, Any]:
    return {
        "ok": True,
        "hasKey": config.has_key,
        "environment": config.environment,
        "region": config.region,
        "timestamp": utc_timestamp(),
        "runtime": RUNTIME_NAME,
        "nodeVersion": platform.python_version(),
        # Presence only, never the key itself
        "keyStatus": config.key_status,
    }


def create_app(config: Optional[StatusConfig] = None) -> Flask:
    """Build the status app around an explicit configuration."""
    config = config if config is not None else StatusConfig.from_env()

    app = Flask(__name__)
    app.config["STATUS_CONFIG"] = config

    CORS(
        app,
        origins=list(config.allowed_origins),
        methods=list(ALLOWED_METHODS),
        allow_headers=list(ALLOWED_HEADERS),
        always_send=False,
    )

    @app.after_request
    def allow_originless_requests(response: Response) -> Response:
        # Requests without an Origin header (curl, uptime monitors) get a wildcard
        if not request.headers.get("Origin"):
            response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.before_request
    def only_get():
        if request.method not in ("GET", "OPTIONS"):
            logger.info("Rejected %s %s", request.method, request.path)
            abort(405)

    @app.errorhandler(404)
    def not_found(error):
        return (
            jsonify({"error": ERROR_MESSAGES["not_found"], "message": "The requested resource was not found"}),
            404,
        )

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": ERROR_MESSAGES["method_not_allowed"]}), 405

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return error
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        return jsonify({"error": ERROR_MESSAGES["internal"], "message": str(error)}), 500

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify(health_payload(config)), 200

    @app.route("/api/diagnostics", methods=["GET"])
    def diagnostics():
        return jsonify(diagnostics_payload(config)), 200

    logger.debug(
        "Status app created (environment=%s, region=%s, key=%s)",
        config.environment,
        config.region,
        config.key_status,
    )
    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    status_app = create_app()
    logger.info("Starting status server on %s:%s", DEFAULT_HOST, DEFAULT_PORT)
    status_app.run(host=DEFAULT_HOST, port=DEFAULT_PORT, debug=False)
