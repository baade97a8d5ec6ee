from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from .config import MAX_PLACEMENT_ATTEMPTS, MIN_ROOM_SIZE
from .errors import InvalidParameter
from .rng import XorShiftRandom
from .sections import FACE_BOTTOM, FACE_LEFT, FACE_RIGHT, FACE_TOP, FACES, Section, face_index

NO_DOOR = -1


@dataclass(frozen=True)
class Room:
    top: int
    left: int
    width: int
    height: int
    section: int  # arena index of the leaf Section the room was placed in
    doors: Tuple[int, int, int, int] = (NO_DOOR, NO_DOOR, NO_DOOR, NO_DOOR)

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def has_door(self, face: int) -> bool:
        return self.doors[face_index(face)] != NO_DOOR

    def door_pos(self, face: int) -> int:
        """Row (LEFT/RIGHT faces) or column (TOP/BOTTOM faces) of the door."""
        return self.doors[face_index(face)]

    def with_door(self, face: int, pos: int) -> "Room":
        doors = list(self.doors)
        doors[face_index(face)] = pos
        return replace(self, doors=tuple(doors))

    def door_faces(self) -> Iterator[int]:
        for face in FACES:
            if self.has_door(face):
                yield face

    def cells(self):
        for ix in range(self.left, self.right):
            for iy in range(self.top, self.bottom):
                yield ix, iy

    def intersects(self, other: "Room") -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


def _draw_span(rng: XorShiftRandom, lo: int, hi: int, field: str) -> Tuple[int, int]:
    """Draw two coordinates in [lo, hi] at least MIN_ROOM_SIZE apart.

    Returns (start, length).
    """
    if hi - lo < MIN_ROOM_SIZE:
        raise InvalidParameter(field, f"region too small for a room ({hi - lo + 2} cells)", "too_small")
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        a = rng.next_int(lo, hi)
        b = rng.next_int(lo, hi)
        if abs(a - b) >= MIN_ROOM_SIZE:
            start = min(a, b)
            return start, max(a, b) - start
    raise InvalidParameter(field, "no room bounds found within the attempt limit", "attempts")


def place_room(section: Section, section_index: int, rng: XorShiftRandom) -> Room:
    """Pick a room strictly inside ``section`` and a door on each joined face.

    The draw order (x span, y span, then doors RIGHT, LEFT, BOTTOM, TOP) is
    fixed; changing it changes every map produced for a seed.
    """
    x, w = _draw_span(rng, section.left + 1, section.right - 1, "width")
    y, h = _draw_span(rng, section.top + 1, section.bottom - 1, "height")
    room = Room(top=y, left=x, width=w, height=h, section=section_index)
    if section.has_face(FACE_RIGHT):
        room = room.with_door(FACE_RIGHT, rng.next_int(y + 1, y + h - 2))
    if section.has_face(FACE_LEFT):
        room = room.with_door(FACE_LEFT, rng.next_int(y + 1, y + h - 2))
    if section.has_face(FACE_BOTTOM):
        room = room.with_door(FACE_BOTTOM, rng.next_int(x + 1, x + w - 2))
    if section.has_face(FACE_TOP):
        room = room.with_door(FACE_TOP, rng.next_int(x + 1, x + w - 2))
    return room


__all__ = ["NO_DOOR", "Room", "place_room"]
