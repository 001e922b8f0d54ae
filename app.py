import logging

from flask import Flask, request, g, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Config
from errors import ApiError
from routes import (
    health_bp,
    auth_bp,
    turfs_bp,
    slots_bp,
    booking_bp,
    payments_bp,
    admin_bp,
)

from models import db
from services import init_services, get_services
from utils.auth_context import load_current_user


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Configure logging
    log_level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    app.logger.setLevel(log_level)

    origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, origins="*" if origins == "*" else [o.strip() for o in origins.split(",")])

    # Register routes
    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(turfs_bp)
    app.register_blueprint(slots_bp)
    app.register_blueprint(booking_bp)
    app.register_blueprint(payments_bp)
    app.register_blueprint(admin_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    init_services(app)

    # Explicit setup: schema, bootstrap admin, seed turfs, slot horizon
    with app.app_context():
        init_store()

    @app.before_request
    def _reject_malformed_json():
        if request.method in ("POST", "PUT", "PATCH") and request.get_data(cache=True):
            if not isinstance(request.get_json(silent=True), dict):
                return jsonify(message="Invalid JSON in request body"), 400
        return None

    @app.before_request
    def _load_user():
        load_current_user()

    @app.errorhandler(ApiError)
    def _handle_api_error(exc):
        return exc.to_response()

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc):
        return jsonify(message=exc.description), exc.code

    @app.errorhandler(Exception)
    def _handle_unexpected(exc):
        db.session.rollback()
        app.logger.error("Unhandled exception on %s %s", request.method, request.path, exc_info=exc)
        return jsonify(message="Internal server error"), 500

    @app.after_request
    def add_security_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "no-referrer"
        return resp

    @app.teardown_request
    def _clear_user(_exc):
        g.pop("user", None)
        g.pop("token", None)

    register_cli(app)

    return app


def init_store():
    """Creates tables and seeds the process-wide store. Safe to call again."""
    db.create_all()
    get_services().setup()

#-------------------------
import click

def register_cli(app):
    @app.cli.command("make-admin")
    @click.argument("email")
    def make_admin(email):
        """Promote a user to admin by email (bootstrap)."""
        user = get_services().credentials.promote(email)
        if not user:
            click.echo("User not found")
            return
        click.echo(f"{user.email} promoted to admin")

    @app.cli.command("seed")
    def seed():
        """Re-run store setup and extend slots to the current horizon."""
        init_store()
        click.echo("Store seeded")

#-------------------------




if __name__ == "__main__":
    app = create_app()
    # Run locally
    app.run(host="127.0.0.1", port=5002)
