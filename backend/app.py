import logging
import os

from flask import Flask
from flask_cors import CORS

from services.shared.structured_logging import configure_logging

from .blueprints.auth import auth_bp
from .blueprints.dashboard import dashboard_bp
from .blueprints.jobs import jobs_bp
from .blueprints.system import system_bp
from .config import Config
from .utils.services import init_services

logger = logging.getLogger(__name__)


def create_app(config_overrides=None, database=None, session_store=None, jsearch_client=None):
    """Application factory function.

    Args:
        config_overrides: Mapping applied on top of ``Config``
        database: Database to use instead of ``DATABASE_URL``
        session_store: Session store to use instead of ``SESSION_BACKEND``
        jsearch_client: JSearch client to use instead of one built from config
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app.config["LOG_LEVEL"])

    # Initialize CORS
    CORS(
        app,
        origins=app.config["CORS_ORIGINS"],
        supports_credentials=True,
        allow_headers=["Content-Type"],
    )

    # A database that cannot be opened is fatal at startup
    init_services(
        app,
        database=database,
        session_store=session_store,
        jsearch_client=jsearch_client,
    )

    # Register Blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(jobs_bp)
    app.register_blueprint(system_bp)

    logger.info(f"QuickHire started ({app.config['ENVIRONMENT']})")
    return app


def main():
    app = create_app()
    debug = os.getenv("ENVIRONMENT", "development") == "development"
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug, use_reloader=debug)


if __name__ == "__main__":
    main()
