"""Presentation helpers shared by the HTTP endpoints and the CLI.

Isolated from the generator so the core never depends on an output format.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from .rooms import Room
from .sections import Section
from .tiles import CELL_CHARS


def code_to_char(code: int) -> str:
    try:
        return CELL_CHARS[code]
    except KeyError:
        raise ValueError(f"unknown cell code {code!r}") from None


def mesh_to_text(mesh: Iterable[int], width: int) -> str:
    """Render a flat mesh, one newline-terminated line per grid row."""
    cells = list(mesh)
    lines = []
    for start in range(0, len(cells), width):
        lines.append("".join(code_to_char(c) for c in cells[start:start + width]))
    return "".join(line + "\n" for line in lines)


def to_text(dungeon) -> str:
    return mesh_to_text(dungeon.mesh, dungeon.width)


def section_to_dict(section: Section) -> Dict[str, int]:
    return {
        "left": section.left,
        "top": section.top,
        "width": section.width,
        "height": section.height,
        "face": section.face,
    }


def room_to_dict(room: Room, section: Section) -> Dict[str, Any]:
    return {
        "top": room.top,
        "left": room.left,
        "width": room.width,
        "height": room.height,
        "door": list(room.doors),
        "section": section_to_dict(section),
    }


def to_dict(dungeon) -> Dict[str, Any]:
    rooms: List[Dict[str, Any]] = [room_to_dict(r, dungeon.section_of(r)) for r in dungeon.rooms]
    return {
        "width": dungeon.width,
        "height": dungeon.height,
        "room_num": dungeon.room_num,
        "seed": dungeon.seed,
        "mesh": list(dungeon.mesh),
        "rooms": rooms,
    }
