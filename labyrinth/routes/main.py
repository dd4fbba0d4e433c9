"""
project: Labyrinth
module: main.py
License: MIT

Core application routes: service index and health check.
"""

from flask import Blueprint, current_app, jsonify

bp = Blueprint("main", __name__)


@bp.route("/")
def index():
    return jsonify(
        {
            "service": "labyrinth",
            "version": current_app.config.get("VERSION"),
            "endpoints": [
                "/api/maze",
                "/api/maze/regenerate",
                "/api/maze/check",
                "/api/maze/ascii",
            ],
        }
    )


@bp.route("/healthz")
def healthz():
    return jsonify({"status": "ok", "version": current_app.config.get("VERSION")})
