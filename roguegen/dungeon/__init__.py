"""Public dungeon package interface."""

from .config import DungeonConfig, MIN_ROOM_SIZE  # noqa: F401
from .errors import ConfigurationExhausted, DungeonError, InvalidParameter  # noqa: F401
from .pipeline import Dungeon, generate  # noqa: F401
from .rooms import NO_DOOR, Room  # noqa: F401
from .sections import FACE_BOTTOM, FACE_LEFT, FACE_NONE, FACE_RIGHT, FACE_TOP, Section  # noqa: F401
from .tiles import BLANK, CORRIDOR, DOOR, FLOOR, HWALL, TEMPORARY, VWALL  # noqa: F401

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "generate",
    "DungeonError",
    "InvalidParameter",
    "ConfigurationExhausted",
    "Room",
    "Section",
    "NO_DOOR",
    "MIN_ROOM_SIZE",
    "FACE_NONE",
    "FACE_TOP",
    "FACE_LEFT",
    "FACE_RIGHT",
    "FACE_BOTTOM",
    "BLANK",
    "FLOOR",
    "CORRIDOR",
    "VWALL",
    "HWALL",
    "DOOR",
    "TEMPORARY",
]
