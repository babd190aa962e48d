from __future__ import annotations

import os
from typing import Any, Dict

import click
from flask import Flask, jsonify, g, request
from sqlalchemy.exc import SQLAlchemyError

from blog.config import Config
from blog.errors import BlogError
from blog.extensions import (
    db,
    migrate,
    login_manager,
    limiter,
)
from blog.logging_config import configure_logging
from blog.security import apply_security_headers
from blog.models.user import User  # ensure models imported for migrations
from blog.services import get_services, init_services
from blog.utils.db_retry import safe_db_operation
from blog.utils.tokens import bearer_token


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging()

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # Rate limiter (in-memory for dev). Strict on auth and writes
    limiter.init_app(app)

    # Services are built once with the scoped session injected
    init_services(app, db.session)

    # Warn when no author account exists yet
    with app.app_context():
        try:
            from blog.utils.user_setup import ensure_user_exists
            ensure_user_exists()
        except Exception as e:
            app.logger.error(f"Failed to check for users: {str(e)}")

    # Bearer token authentication for Flask-Login
    @login_manager.request_loader
    def load_user_from_request(req) -> User | None:
        token = bearer_token(req.headers.get("Authorization"))
        if not token:
            return None
        return safe_db_operation(get_services().auth.validate_token, token)

    @login_manager.unauthorized_handler
    def unauthorized_request():
        return jsonify({"error": "unauthorized", "message": "valid bearer token required"}), 401

    # Request context enrichment for logging
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()
        # Each request authenticates from its own Authorization header
        g.pop("_login_user", None)

    # Security headers
    @app.after_request
    def set_headers(resp):
        return apply_security_headers(resp)

    # Blueprints
    from blog.blueprints.api import bp as api_bp

    app.register_blueprint(api_bp)

    # Health route
    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except SQLAlchemyError:
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    # Domain errors carry their own status and code
    @app.errorhandler(BlogError)
    def blog_error(e: BlogError):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def database_error(e: SQLAlchemyError):
        db.session.rollback()
        app.logger.error(f"Database error on {request.method} {request.path}: {e}")
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # Error handlers (JSON)
    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "bad_request", "message": str(e)}), 400

    @app.errorhandler(401)
    def unauthorized(e):
        return jsonify({"error": "unauthorized", "message": str(e)}), 401

    @app.errorhandler(403)
    def forbidden(e):
        return jsonify({"error": "forbidden", "message": str(e)}), 403

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "method_not_allowed", "message": str(e)}), 405

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify({"error": "payload_too_large", "message": "request body too large"}), 413

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: create author account
    @app.cli.command("create-user")
    @click.option("--email", prompt=True)
    @click.option("--name", prompt=True)
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    def create_user(email: str, name: str, password: str) -> None:
        with app.app_context():
            try:
                get_services().auth.register_user(email, name, password)
            except BlogError as e:
                click.echo(e.message)
                return
            click.echo("User created")

    return app
