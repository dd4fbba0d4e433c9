"""
project: Labyrinth
module: maze_api.py
License: MIT

Maze generation API routes.

Every route returns wall flags for a freshly generated (or, for seeded
requests, cached) maze. Dimension text is parsed best-effort: anything that
is not an integer falls back to the configured default, and values below the
minimum are clamped, so bad input never produces an error response.
"""

import hashlib
import os
import threading

from flask import Blueprint, Response, current_app, jsonify, request, session

from labyrinth.logging_utils import get_logger
from labyrinth.maze import (
    SAMPLING_POLICIES,
    MazeResult,
    analyze,
    clamp_dimension,
    generate,
    parse_dimension,
    parse_regenerate_request,
    render_ascii,
)
from labyrinth.maze.pipeline import configured_sampling

bp_maze = Blueprint("maze", __name__)

_log = get_logger("maze_api")

SEED_MAX = 9223372036854775807
SESSION_DIMENSIONS_KEY = "maze_dimensions"

# In-process cache (seed, rows, columns, sampling) -> MazeResult. Only seeded
# requests are cached; Flask-SocketIO may interleave handlers, hence the lock.
_maze_cache = {}
_maze_cache_lock = threading.Lock()
_MAZE_CACHE_MAX = 16


def coerce_seed(raw):
    """Convert a provided seed (int or str) into a bounded int, or None for a random maze."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw % SEED_MAX
    if isinstance(raw, str):
        s = raw.strip()
        if not s:
            return None
        if s.isascii() and s.isdigit():
            try:
                return int(s) % SEED_MAX
            except ValueError:
                # more digits than int() converts; hash it like any other text
                pass
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MAX
    return None


def get_cached_maze(seed, rows: int, columns: int, sampling: str) -> MazeResult:
    rows, columns = clamp_dimension(rows), clamp_dimension(columns)
    if seed is None or os.environ.get("MAZE_DISABLE_CACHE") == "1":
        return generate(rows, columns, seed=seed, sampling=sampling)
    key = (seed, rows, columns, sampling)
    with _maze_cache_lock:
        cached = _maze_cache.get(key)
    if cached is not None:
        return cached
    result = generate(rows, columns, seed=seed, sampling=sampling)
    with _maze_cache_lock:
        _maze_cache[key] = result
        if len(_maze_cache) > _MAZE_CACHE_MAX:
            first_key = next(iter(_maze_cache.keys()))
            if first_key != key:
                _maze_cache.pop(first_key, None)
    return result


def default_dimensions():
    cfg = current_app.config
    return cfg.get("MAZE_DEFAULT_ROWS", 2), cfg.get("MAZE_DEFAULT_COLUMNS", 2)


def resolve_sampling(raw):
    """Validate a client supplied policy; None means the client sent an unknown one."""
    if not raw:
        return configured_sampling(current_app.config)
    if raw not in SAMPLING_POLICIES:
        return None
    return raw


def _sampling_error(raw):
    return jsonify({
        "error": f"unknown sampling policy: {raw}",
        "field": "sampling",
        "code": "choice",
        "allowed": list(SAMPLING_POLICIES),
    }), 400


def _maze_from_query():
    """Build a maze from query args; returns (result, None) or (None, error_response)."""
    default_rows, default_columns = default_dimensions()
    rows = parse_dimension(request.args.get("rows"), default_rows)
    columns = parse_dimension(request.args.get("columns"), default_columns)
    raw_sampling = request.args.get("sampling")
    sampling = resolve_sampling(raw_sampling)
    if sampling is None:
        return None, _sampling_error(raw_sampling)
    seed = coerce_seed(request.args.get("seed"))
    return get_cached_maze(seed, rows, columns, sampling), None


@bp_maze.route("/api/maze")
def maze():
    """
    Generate a maze.
    Query: rows, columns (raw text, default 2, min 2), seed (int or text), sampling.
    Response: { rows, columns, seed, sampling, entrance, exit, cells: [[{up,down,left,right}]], metrics }
    """
    result, err = _maze_from_query()
    if err is not None:
        return err
    _log.info(event="maze_generated", rows=result.rows, columns=result.columns, seed=result.seed)
    return jsonify(result.to_dict())


@bp_maze.route("/api/maze/regenerate", methods=["POST"])
def regenerate():
    """Regenerate from raw width/height text.

    Body JSON (all optional): { "width": <str|int>, "height": <str|int>, "seed": <int|str|null>, "sampling": <str> }
    - height -> rows, width -> columns.
    - Unparseable values keep the dimensions of the previous regeneration in this
      session (2x2 initially).
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    raw_sampling = data.get("sampling")
    sampling = resolve_sampling(raw_sampling)
    if sampling is None:
        return _sampling_error(raw_sampling)
    previous = tuple(session.get(SESSION_DIMENSIONS_KEY) or default_dimensions())
    rows, columns = parse_regenerate_request(data.get("width"), data.get("height"), previous)
    session[SESSION_DIMENSIONS_KEY] = [rows, columns]
    result = get_cached_maze(coerce_seed(data.get("seed")), rows, columns, sampling)
    _log.info(event="maze_regenerated", rows=rows, columns=columns, seed=result.seed,
              previous=f"{previous[0]}x{previous[1]}")
    return jsonify(result.to_dict())


@bp_maze.route("/api/maze/check")
def check():
    """Generate a maze and return its structural analysis instead of the walls."""
    result, err = _maze_from_query()
    if err is not None:
        return err
    return jsonify(analyze(result))


@bp_maze.route("/api/maze/ascii")
def ascii_view():
    """Generate a maze and return it as plain text."""
    result, err = _maze_from_query()
    if err is not None:
        return err
    return Response(render_ascii(result) + "\n", mimetype="text/plain")
