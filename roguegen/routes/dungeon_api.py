"""
project: roguegen
module: dungeon_api.py
License: MIT

Dungeon map endpoints.

Two views over the same generator:
    GET /api/dungeon/map     JSON mesh + room geometry   (legacy: /rouge_dangeon)
    GET /api/dungeon/sample  plain text rendering        (legacy: /rouge_sample)

Query parameters: w (width), h (height), n (room count), s (seed). A missing,
non-numeric or zero value falls back to the configured default; without `s`
every request produces a fresh map.
"""

import os
import threading

from flask import Blueprint, Response, current_app, jsonify, request

from roguegen.dungeon import Dungeon, DungeonError
from roguegen.dungeon.render import to_dict, to_text
from roguegen.logging_utils import get_logger

log = get_logger("roguegen.api")

bp_dungeon = Blueprint("dungeon", __name__)

# Simple in-process cache (w,h,n,seed)->Dungeon. Only seeded maps are cached since
# unseeded ones are different on every call.
_dungeon_cache = {}
_dungeon_cache_lock = threading.Lock()


def get_cached_dungeon(width: int, height: int, room_num: int, seed: int | None) -> Dungeon:
    if seed is None or os.environ.get("DUNGEON_DISABLE_CACHE") == "1":
        return Dungeon(width=width, height=height, room_num=room_num, seed=seed)
    key = (width, height, room_num, seed)
    with _dungeon_cache_lock:
        dungeon = _dungeon_cache.get(key)
        if dungeon is not None:
            return dungeon
    dungeon = Dungeon(width=width, height=height, room_num=room_num, seed=seed)
    cache_max = current_app.config.get("DUNGEON_CACHE_MAX", 8)
    with _dungeon_cache_lock:
        _dungeon_cache[key] = dungeon
        while len(_dungeon_cache) > cache_max:
            first_key = next(iter(_dungeon_cache.keys()))
            _dungeon_cache.pop(first_key, None)
    return dungeon


def clear_dungeon_cache() -> None:
    with _dungeon_cache_lock:
        _dungeon_cache.clear()


def _int_arg(name: str, default):
    raw = request.args.get(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value or default


def _requested_dungeon() -> Dungeon:
    cfg = current_app.config
    width = _int_arg("w", cfg["DUNGEON_DEFAULT_WIDTH"])
    height = _int_arg("h", cfg["DUNGEON_DEFAULT_HEIGHT"])
    room_num = _int_arg("n", cfg["DUNGEON_DEFAULT_ROOMS"])
    seed = _int_arg("s", None)
    return get_cached_dungeon(width, height, room_num, seed)


@bp_dungeon.errorhandler(DungeonError)
def _dungeon_error(err: DungeonError):
    log.warn(event="dungeon_param_rejected", field=err.field, code=err.code, path=request.path)
    return jsonify(err.to_dict()), 400


@bp_dungeon.route("/api/dungeon/map")
@bp_dungeon.route("/rouge_dangeon")
def dungeon_map():
    """
    Return a generated map as JSON.
    Response: { 'width', 'height', 'room_num', 'seed', 'mesh': [codes], 'rooms': [...] }
    """
    return jsonify(to_dict(_requested_dungeon()))


@bp_dungeon.route("/api/dungeon/sample")
@bp_dungeon.route("/rouge_sample")
def dungeon_sample():
    """Return the map as text, one line per row."""
    dungeon = _requested_dungeon()
    return Response(to_text(dungeon), mimetype="text/plain")
