"""Request-layer helpers shared by every controller."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import Flask, g, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.constants import NOT_READY_MESSAGE, SERVER_ERROR_MESSAGE
from ..core.exceptions import AuthenticationError, DomainError
from ..users.identity import Identity

logger = logging.getLogger(__name__)


def login_required(view):
    """Resolve the session identity into ``g.identity`` or answer 401."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        identity = Identity.from_session(session)
        if identity is None:
            raise AuthenticationError("Unauthorized")
        g.identity = identity
        return view(*args, **kwargs)

    return wrapper


def current_identity() -> Identity:
    identity = g.get("identity")
    if identity is None:
        raise AuthenticationError("Unauthorized")
    return identity


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if e.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, e, exc_info=e.__cause__)
        return jsonify({"message": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": SERVER_ERROR_MESSAGE}), 500


def register_readiness_gate(app: Flask, conn, *, exempt: set[str]) -> None:
    """Answer 503 until the database pool can be opened."""

    @app.before_request
    def require_database():
        if request.endpoint in exempt:
            return None
        if not conn.ensure_ready():
            return jsonify({"message": NOT_READY_MESSAGE}), 503
        return None


def register_request_logging(app: Flask) -> None:
    @app.after_request
    def log_request(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response
