"""Socket.IO maze handlers.

Events:
    - request_maze: Generate a maze; payload { rows?, columns?, seed?, sampling? }
    - regenerate_maze: Regenerate from raw UI text; payload { width?, height?, seed?, sampling? }

Emits:
    - maze: MazeResult.to_dict() for the requesting client
    - error: { message, field, code } when the payload shape is invalid
"""

from flask import request
from flask_socketio import emit

from labyrinth import socketio
from labyrinth.logging_utils import get_logger
from labyrinth.maze import parse_dimension, parse_regenerate_request
from labyrinth.routes.maze_api import coerce_seed, default_dimensions, get_cached_maze, resolve_sampling

from .validation import REGENERATE_MAZE, REQUEST_MAZE, validate

_log = get_logger("ws_maze")

# Dimensions of the last maze sent to each connection: { sid: (rows, columns) }
connection_dimensions = {}


def _emit_invalid(event: str, result: dict):
    emit('error', {'message': f"Invalid {event}: {result['error']}", 'field': result['field'], 'code': result['code']})


def _emit_maze(event: str, result: dict, rows: int, columns: int):
    raw_sampling = result.get('sampling')
    sampling = resolve_sampling(raw_sampling)
    if sampling is None:
        emit('error', {'message': f"Invalid {event}: unknown sampling policy", 'field': 'sampling', 'code': 'choice'})
        return
    maze = get_cached_maze(coerce_seed(result.get('seed')), rows, columns, sampling)
    connection_dimensions[request.sid] = (maze.rows, maze.columns)
    emit('maze', maze.to_dict())
    _log.info(event=event, sid=request.sid, rows=maze.rows, columns=maze.columns, seed=maze.seed)


@socketio.on('request_maze')
def handle_request_maze(data=None):
    ok, result = validate(data if data is not None else {}, REQUEST_MAZE)
    if not ok:
        _emit_invalid('request_maze', result)
        return
    default_rows, default_columns = default_dimensions()
    rows = parse_dimension(result.get('rows'), default_rows)
    columns = parse_dimension(result.get('columns'), default_columns)
    _emit_maze('request_maze', result, rows, columns)


@socketio.on('regenerate_maze')
def handle_regenerate_maze(data=None):
    ok, result = validate(data if data is not None else {}, REGENERATE_MAZE)
    if not ok:
        _emit_invalid('regenerate_maze', result)
        return
    previous = connection_dimensions.get(request.sid) or default_dimensions()
    rows, columns = parse_regenerate_request(result.get('width'), result.get('height'), previous)
    _emit_maze('regenerate_maze', result, rows, columns)


@socketio.on('disconnect')
def handle_disconnect(reason=None):
    connection_dimensions.pop(request.sid, None)
