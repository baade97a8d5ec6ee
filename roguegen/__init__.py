"""
project: roguegen
module: __init__.py
License: MIT

Flask application factory for the dungeon map service.

Configuration is sourced from environment variables (optionally via a local
.env file) with defaults matching the classic 70x40, ten room map. A local
`instance/` directory holds runtime files such as the rotating log.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

__version__ = "0.1.0"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def create_app(overrides=None):
    """Build and return a configured Flask app.

    ``overrides`` (a mapping) is applied last, after environment values, which
    is how tests pin defaults without touching the process environment.
    """
    # Load .env if present so defaults can be tuned without exporting variables.
    load_dotenv()

    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # Read-only deployments simply skip the file log.
        pass

    app.config.update(
        DUNGEON_DEFAULT_WIDTH=int(os.getenv("DUNGEON_DEFAULT_WIDTH", "70")),
        DUNGEON_DEFAULT_HEIGHT=int(os.getenv("DUNGEON_DEFAULT_HEIGHT", "40")),
        DUNGEON_DEFAULT_ROOMS=int(os.getenv("DUNGEON_DEFAULT_ROOMS", "10")),
        DUNGEON_ENABLE_GENERATION_METRICS=_env_flag("DUNGEON_ENABLE_GENERATION_METRICS", "1"),
        DUNGEON_CACHE_MAX=int(os.getenv("DUNGEON_CACHE_MAX", "8")),
    )
    if overrides:
        app.config.update(overrides)

    from roguegen.routes.dungeon_api import bp_dungeon

    app.register_blueprint(bp_dungeon)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app
