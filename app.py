"""Application factory."""

import os
import uuid
from http import HTTPStatus

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Config
from mailers import build_mailer
from models import db
from routes.auth import auth_bp
from utils.responses import error_response
from utils.session_gate import init_session_gate

migrate = Migrate()
jwt = JWTManager()
limiter = Limiter(key_func=get_remote_address)


# Session failures on protected API routes render as envelopes.
@jwt.unauthorized_loader
def _missing_token(reason: str):
    return error_response(HTTPStatus.UNAUTHORIZED, "Unauthorized")


@jwt.invalid_token_loader
def _invalid_token(reason: str):
    return error_response(HTTPStatus.UNAUTHORIZED, "Unauthorized")


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return error_response(HTTPStatus.UNAUTHORIZED, "Session has expired")


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    app.extensions["mailer"] = build_mailer(app.config)

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # Rate limiting
    storage_uri = app.config.get("RATELIMIT_STORAGE_URI", "memory://")
    headers_enabled = app.config.get("RATELIMIT_HEADERS_ENABLED", True)
    key_prefix = app.config.get("RATELIMIT_KEY_PREFIX") or str(uuid.uuid4())

    global limiter
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[lambda: app.config.get("RATE_LIMIT", "60 per minute")],
        storage_uri=storage_uri,
        headers_enabled=headers_enabled,
        key_prefix=key_prefix,
    )
    limiter.init_app(app)
    app.config["RATELIMIT_KEY_PREFIX"] = key_prefix

    # Request IDs first, so they are assigned even when the gate redirects
    _register_error_handlers(app)
    init_session_gate(app)

    # Blueprints
    app.register_blueprint(auth_bp, url_prefix="/api")

    # Health
    @app.route("/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    return app


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():  # pragma: no cover
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):  # pragma: no cover
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        response = error_response(
            error.code or HTTPStatus.INTERNAL_SERVER_ERROR,
            error.description or getattr(error, "name", "Error"),
            getattr(error, "errors", None),
        )
        for header, value in error.get_headers():
            if header.lower() != "content-type":
                response.headers.setdefault(header, value)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):  # pragma: no cover
        app.logger.exception("Unhandled application error", exc_info=error)
        db.session.rollback()
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Something went wrong")


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
