"""
project: Labyrinth
module: __init__.py
License: MIT

Flask application and core extensions setup.

This module wires together the Flask app and Flask-SocketIO. Configuration is
sourced from environment variables (optionally via a local .env file) with
defaults suitable for development. Mazes are never persisted; the instance/
directory only holds the rotating log file.
"""

import logging
import os
import uuid
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_socketio import SocketIO

from labyrinth.maze.parsing import parse_dimension

# Load .env if present so SECRET_KEY, MAZE_* etc. can be supplied without
# exporting shell variables during development.
load_dotenv()


def _load_version() -> str:
    version_file = Path(__file__).resolve().parent.parent / "VERSION"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only deployments can still serve; file logging is skipped in that case.
    pass

app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    VERSION=__version__,
    # Maze generation defaults / feature flags
    MAZE_DEFAULT_ROWS=parse_dimension(os.getenv("MAZE_DEFAULT_ROWS"), 2),
    MAZE_DEFAULT_COLUMNS=parse_dimension(os.getenv("MAZE_DEFAULT_COLUMNS"), 2),
    MAZE_SAMPLING=os.getenv("MAZE_SAMPLING", "retry"),
    MAZE_ENABLE_GENERATION_METRICS=bool(os.getenv("MAZE_ENABLE_GENERATION_METRICS", "1") == "1"),
)

# Let Flask-SocketIO select best async_mode based on installed deps (eventlet/gevent/threading)
socketio = SocketIO(
    app,
    async_mode=os.getenv("SOCKETIO_ASYNC_MODE") or None,
    cors_allowed_origins=os.getenv("CORS_ALLOWED_ORIGINS", "*"),
    engineio_logger=bool(os.getenv("ENGINEIO_LOGGER", "0") == "1"),
    ping_interval=20,
    ping_timeout=10,
)

# Register HTTP blueprints
from labyrinth.routes import main  # noqa: E402
from labyrinth.routes.maze_api import bp_maze  # noqa: E402

app.register_blueprint(main.bp)
app.register_blueprint(bp_maze)

# Import websocket handlers so their event decorators register with Socket.IO (side-effect)
from labyrinth.websockets import maze as _ws_maze  # noqa: F401,E402

# Route map debug output. Suppress with LABYRINTH_SUPPRESS_ROUTE_MAP=1.
if os.getenv("LABYRINTH_SUPPRESS_ROUTE_MAP") not in ("1", "true", "yes"):
    print("Registered routes:")
    print(app.url_map)


def create_app(config: dict | None = None):
    """Return the Flask app instance, applying optional config overrides.

    The app is a module-level singleton (Socket.IO handlers bind to it at
    import), so overrides mutate the shared config.
    """
    if config:
        app.config.update(config)
    return app


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal server error", "error_id": error_id}), 500
