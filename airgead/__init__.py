"""Airgead Planner Flask Application Factory."""

import logging
from typing import Optional

from flask import Flask

from airgead.config import Settings, get_global_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use instead of the global environment settings

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    if settings is None:
        settings = get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["DATABASE_URL"] = settings.db_url
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["TESTING"] = settings.app_env == "testing"

    # Logging
    app.logger.setLevel(settings.log_level)
    logging.getLogger("airgead").setLevel(settings.log_level)

    # Collaborators used by the blueprints
    from airgead.blueprints.context import (
        AUTH_CLIENT_EXTENSION,
        SESSION_FACTORY_EXTENSION,
        SETTINGS_EXTENSION,
    )
    from airgead.database.base import create_session_factory
    from airgead.services.auth_service import AuthClient

    app.extensions[SETTINGS_EXTENSION] = settings
    app.extensions[AUTH_CLIENT_EXTENSION] = AuthClient.from_settings(settings)
    app.extensions[SESSION_FACTORY_EXTENSION] = create_session_factory(
        settings.db_url, echo=settings.log_level == "DEBUG"
    )

    # Register blueprints
    from airgead.blueprints.auth import auth_bp
    from airgead.blueprints.health import health_bp
    from airgead.blueprints.scenarios import scenarios_bp
    from airgead.blueprints.schedule import schedule_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(schedule_bp)
    app.register_blueprint(scenarios_bp)
    app.register_blueprint(auth_bp)

    return app
