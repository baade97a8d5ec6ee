"""Generation errors.

Every failure the generator can report is a ``DungeonError`` carrying the
offending ``field`` and a short machine readable ``code``, mirroring the
payload shape the HTTP layer returns::

    {"error": "room_num must be >= 1", "field": "room_num", "code": "min"}
"""
from __future__ import annotations
from typing import Any, Dict


class DungeonError(Exception):
    def __init__(self, field: str, message: str, code: str):
        super().__init__(message)
        self.field = field
        self.message = message
        self.code = code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "field": self.field, "code": self.code}


class InvalidParameter(DungeonError):
    """A generation parameter is malformed or cannot yield valid rooms."""


class ConfigurationExhausted(DungeonError):
    """The grid cannot be partitioned into the requested number of regions."""


__all__ = ["DungeonError", "InvalidParameter", "ConfigurationExhausted"]
