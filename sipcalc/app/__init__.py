"""Application factory and app-wide configuration."""

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from sipcalc.app.api.routes import HISTORY_EXTENSION, api_bp
from sipcalc.app.config import DefaultConfig
from sipcalc.core.history import HistoryStore
from sipcalc.logging_config import setup_logging


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("SIPCALC")
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.extensions[HISTORY_EXTENSION] = HistoryStore(
        path=app.config["HISTORY_PATH"],
        limit=app.config["HISTORY_LIMIT"],
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
