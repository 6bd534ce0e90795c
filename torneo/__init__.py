"""Initialize the Flask app and its extensions."""

import json
import os

import firebase_admin
from firebase_admin import credentials
from flask import Flask, g, session
from werkzeug.middleware.proxy_fix import ProxyFix
from werkzeug.security import generate_password_hash

from .constants import (
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_APP_ID,
    DEFAULT_SITE_URL,
    SESSION_USER_ID,
)
from .extensions import csrf


def _env_flag(name, default):
    return (os.environ.get(name) or default).lower() in ["true", "1", "t"]


def _load_credentials(app):
    """Find Firebase credentials: env JSON, local file, then application default."""
    cred = None
    project_id = None

    # First, try to load from environment variable (for production)
    cred_json = os.environ.get("FIREBASE_CREDENTIALS_JSON")
    if cred_json:
        try:
            cred_info = json.loads(cred_json)
            project_id = cred_info.get("project_id")
            cred = credentials.Certificate(cred_info)
        except (json.JSONDecodeError, ValueError) as e:
            app.logger.error(f"Error parsing FIREBASE_CREDENTIALS_JSON: {e}")

    # If env var fails or is not present, try loading from file (for local dev)
    if not cred:
        cred_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "firebase_credentials.json"
        )
        if os.path.exists(cred_path):
            try:
                with open(cred_path, "r") as f:
                    cred_info = json.load(f)
                project_id = cred_info.get("project_id")
                cred = credentials.Certificate(cred_path)
            except (json.JSONDecodeError, ValueError) as e:
                app.logger.error(f"Error loading credentials from file: {e}")

    # If both methods fail, fallback to default credentials
    if not cred:
        try:
            cred = credentials.ApplicationDefault()
            project_id = os.environ.get("FIREBASE_PROJECT_ID")
        except Exception as e:
            app.logger.error(
                f"Could not find any valid credentials (env, file, or default): {e}"
            )

    return cred, project_id


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(
        __name__,
        instance_relative_config=True,
        static_folder="static",
        static_url_path="/static",
    )

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        APP_ID=os.environ.get("APP_ID") or DEFAULT_APP_ID,
        ADMIN_PASSWORD=os.environ.get("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
        SITE_URL=os.environ.get("SITE_URL") or DEFAULT_SITE_URL,
        LIVE_SYNC=_env_flag("LIVE_SYNC", "true"),
        LIVE_POLL_SECONDS=int(os.environ.get("LIVE_POLL_SECONDS") or 10),
    )

    if test_config:
        app.config.update(test_config)

    if app.config.get("TESTING") and "LIVE_SYNC" not in (test_config or {}):
        app.config["LIVE_SYNC"] = False

    # The plain password never leaves the factory.
    app.config["ADMIN_PASSWORD_HASH"] = generate_password_hash(
        app.config.pop("ADMIN_PASSWORD"), method="pbkdf2:sha256"
    )

    # Initialize Firebase Admin SDK only if not in testing mode
    if not app.config.get("TESTING"):
        cred, project_id = _load_credentials(app)

        # Initialize the app if credentials were found
        if cred and not firebase_admin._apps:
            try:
                firebase_options = {}
                if project_id:
                    firebase_options["projectId"] = project_id
                firebase_admin.initialize_app(cred, firebase_options)
            except ValueError:
                # This can happen if the app is already initialized, which is fine.
                app.logger.info("Firebase app already initialized.")

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from . import tournament as tournament_bp

    app.register_blueprint(tournament_bp.bp)

    from . import bets as bets_bp

    app.register_blueprint(bets_bp.bp)

    from . import admin as admin_bp

    app.register_blueprint(admin_bp.bp)

    from . import live

    app.register_blueprint(live.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    @app.before_request
    def load_identity():
        """Expose an already resolved anonymous identity in g.

        New identities are only created by views marked ``identity_required``.
        """
        g.user_id = session.get(SESSION_USER_ID)

    from .context_processors import inject_global_context, inject_navigation

    app.context_processor(inject_global_context)
    app.context_processor(inject_navigation)

    live.LiveState().init_app(app)

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app
