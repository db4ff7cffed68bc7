from __future__ import annotations

from flask import Flask
from dotenv import load_dotenv
load_dotenv()

from .config import Settings
from .logging import setup_logging
from .api import api_bp


def create_app(settings: Settings | None = None) -> Flask:
    """
    Minimal Flask application factory.
    """
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(settings)  # type: ignore[arg-type]
    app.json.sort_keys = False  # keep wire order in jsonify

    # blueprints
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
