"""Minimal structured logging helper.

Emits key=value pairs (or one JSON object per line) with a timestamp and level.
Domain events (maze generated, regeneration requested, server startup) go
through here; framework output keeps using the stdlib logging setup in
`labyrinth.server`.

Usage:
    from labyrinth.logging_utils import log
    log.info(event="server_start", port=5000)

Settings come from LABYRINTH_LOG_LEVEL (debug|info|warn|error) and
LABYRINTH_LOG_JSON, and can be changed at runtime with configure().
Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")

CURRENT_LEVEL = LEVELS.get(os.getenv("LABYRINTH_LOG_LEVEL", "info"), 20)
JSON_MODE = os.getenv("LABYRINTH_LOG_JSON", "0") in _TRUTHY


def configure(level: str | None = None, json_mode: bool | None = None) -> None:
    """Override the level / output mode picked up from the environment."""
    global CURRENT_LEVEL, JSON_MODE
    if level is not None:
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        CURRENT_LEVEL = LEVELS[level]
    if json_mode is not None:
        JSON_MODE = bool(json_mode)


def _format(level: str, **fields) -> str:
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "labyrinth"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("labyrinth")
