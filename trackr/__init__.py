"""Flask application factory for trackr."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config
from .extensions import db, init_extensions


def _register_blueprints(app: Flask) -> None:
    """Register all blueprints used by the project."""
    from .addresses import bp as addresses_bp
    from .auth import bp as auth_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(addresses_bp)


def _register_common_routes(app: Flask) -> None:
    @app.get("/health")
    def health():
        return ("", 204)

    @app.get("/ready")
    def ready():
        return jsonify(status="ok"), 200


def _register_error_handlers(app: Flask) -> None:
    def _json_error(err: HTTPException, error: str):
        resp = jsonify(error=error)
        resp.status_code = err.code
        return resp

    @app.errorhandler(400)
    def _bad_request(err):
        return _json_error(err, err.description or "bad_request")

    @app.errorhandler(401)
    def _unauthorized(err):
        return _json_error(err, "unauthorized")

    @app.errorhandler(403)
    def _forbidden(err):
        return _json_error(err, "forbidden")

    @app.errorhandler(404)
    def _not_found(err):
        return _json_error(err, "not_found")

    @app.errorhandler(405)
    def _method_not_allowed(err):
        resp = _json_error(err, "method_not_allowed")
        if getattr(err, "valid_methods", None):
            resp.headers["Allow"] = ", ".join(err.valid_methods)
        return resp


def _apply_security_headers(app: Flask) -> None:
    @app.after_request
    def _set_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "same-origin")
        return resp


def create_app(config_class: type[Config] = Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)

    init_extensions(app)

    with app.app_context():
        from . import models  # noqa: F401
        db.create_all()

    from .services.permissions_service import bootstrap_admin_from_config
    bootstrap_admin_from_config(app)

    from .commands import register_commands
    register_commands(app)

    _register_blueprints(app)
    _register_common_routes(app)
    _register_error_handlers(app)
    _apply_security_headers(app)
    app.logger.debug("trackr app created with %s", config_class.__name__)
    return app
