"""Corridor routing.

Corridors ("coves") are built in two passes over the partition tree:

  * Door coves run straight from each door to the edge of the room's own
    section, so every corridor stub ends on a line shared with a sibling.
  * Merge coves are found by scanning the line two sibling sections share:
    the first and last CORRIDOR cells on that line are bridged, joining the
    stubs that arrived from both sides.

Because a section's faces are inherited by all of its descendants, every
subtree has at least one stub ending on each line it shares with its
sibling, which is what keeps the whole map connected.
"""
from __future__ import annotations
from itertools import permutations
from typing import Iterator, List, NamedTuple, Sequence, Tuple

from .mesh import Mesh
from .rooms import Room
from .sections import FACE_BOTTOM, FACE_LEFT, FACE_RIGHT, FACE_TOP, Section
from .tiles import CORRIDOR

DIRECTION_V = 1
DIRECTION_H = 2


class Cove(NamedTuple):
    left: int
    top: int
    right: int
    bottom: int
    direction: int

    @classmethod
    def run(cls, x: int, y: int, direction: int, length: int) -> "Cove":
        """Straight run starting at (x, y); a negative length runs backwards."""
        if direction == DIRECTION_H:
            return cls(min(x, x + length), y, max(x, x + length), y, direction)
        return cls(x, min(y, y + length), x, max(y, y + length), direction)

    @property
    def length(self) -> int:
        if self.direction == DIRECTION_H:
            return self.right - self.left
        return self.bottom - self.top

    def cells(self) -> Iterator[Tuple[int, int]]:
        # Half-open: the far end is the cell the run connects to, not part of it.
        if self.direction == DIRECTION_H:
            for x in range(self.left, self.right):
                yield x, self.bottom
        else:
            for y in range(self.top, self.bottom):
                yield self.right, y


def mark_exits(mesh: Mesh, room: Room, section: Section) -> None:
    """Outline the room's section and probe from each door to that outline."""
    mesh.mark_section(section)
    if room.has_door(FACE_RIGHT):
        mesh.probe(room.right, room.door_pos(FACE_RIGHT), 1, 0)
    if room.has_door(FACE_LEFT):
        mesh.probe(room.left - 1, room.door_pos(FACE_LEFT), -1, 0)
    if room.has_door(FACE_BOTTOM):
        mesh.probe(room.door_pos(FACE_BOTTOM), room.bottom, 0, 1)
    if room.has_door(FACE_TOP):
        mesh.probe(room.door_pos(FACE_TOP), room.top - 1, 0, -1)


def door_coves(room: Room, section: Section) -> List[Cove]:
    coves = []
    if room.has_door(FACE_LEFT):
        coves.append(Cove.run(room.left, room.door_pos(FACE_LEFT), DIRECTION_H, section.left - room.left))
    if room.has_door(FACE_RIGHT):
        coves.append(Cove.run(room.right, room.door_pos(FACE_RIGHT), DIRECTION_H, section.right - room.right))
    if room.has_door(FACE_TOP):
        coves.append(Cove.run(room.door_pos(FACE_TOP), section.top, DIRECTION_V, room.top - section.top))
    if room.has_door(FACE_BOTTOM):
        coves.append(Cove.run(room.door_pos(FACE_BOTTOM), room.bottom, DIRECTION_V, section.bottom - room.bottom))
    return coves


def scan_line(mesh: Mesh, section: Section) -> List[Cove]:
    """Bridge CORRIDOR cells on the section's left column and top row."""
    coves = []
    column = [y for y in range(section.top, section.bottom) if mesh.get(section.left, y) == CORRIDOR]
    if len(column) > 1:
        coves.append(Cove.run(section.left, column[0], DIRECTION_V, column[-1] - column[0]))
    row = [x for x in range(section.left, section.right) if mesh.get(x, section.top) == CORRIDOR]
    if len(row) > 1:
        coves.append(Cove.run(row[0], section.top, DIRECTION_H, row[-1] - row[0]))
    return coves


def merge_coves(mesh: Mesh, sections: Sequence[Section]) -> List[Cove]:
    """Scan every ordered pair of sibling sections, internal nodes included.

    Only reads the mesh; the returned coves are stamped by the caller once
    every pair has been scanned.
    """
    coves: List[Cove] = []
    for a, b in permutations(sections, 2):
        if a.is_root or b.is_root or a.parent != b.parent:
            continue
        coves.extend(scan_line(mesh, a))
    return coves


def stamp(mesh: Mesh, coves: Sequence[Cove]) -> int:
    cells = 0
    for cove in coves:
        run = list(cove.cells())
        mesh.fill(run, CORRIDOR)
        cells += len(run)
    return cells


__all__ = [
    "DIRECTION_V",
    "DIRECTION_H",
    "Cove",
    "mark_exits",
    "door_coves",
    "scan_line",
    "merge_coves",
    "stamp",
]
