"""Binary space partition of the map into room regions.

The tree is kept as a flat arena: every Section ever created is appended to
``SectionTree.sections`` and refers to the section it was split from by index
(``-1`` for the root). ``SectionTree.leaves`` lists the arena indices of the
regions that were never split, in the order rooms are placed in them.

Neighbouring children share one row or column: the right child of a vertical
split starts on the last column of the left child, so both rooms' corridors
meet on the same line.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, NamedTuple

from .config import SPLIT_MARGIN
from .errors import ConfigurationExhausted
from .rng import XorShiftRandom

FACE_NONE = 0
FACE_TOP = 1 << 0
FACE_LEFT = 1 << 1
FACE_RIGHT = 1 << 2
FACE_BOTTOM = 1 << 3

FACES = (FACE_TOP, FACE_LEFT, FACE_RIGHT, FACE_BOTTOM)

NO_PARENT = -1


def face_index(face: int) -> int:
    """Slot (0..3) of a single face bit."""
    return face.bit_length() - 1


@dataclass(frozen=True)
class Section:
    left: int
    top: int
    width: int
    height: int
    face: int = FACE_NONE
    parent: int = NO_PARENT

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_root(self) -> bool:
        return self.parent == NO_PARENT

    def has_face(self, face: int) -> bool:
        return (self.face & face) != 0


class SectionTree(NamedTuple):
    sections: List[Section]
    leaves: List[int]

    def leaf_sections(self) -> List[Section]:
        return [self.sections[i] for i in self.leaves]


def split_vertical(parent: Section, parent_index: int, rng: XorShiftRandom):
    d = rng.next_int(SPLIT_MARGIN, parent.width - SPLIT_MARGIN)
    left = Section(parent.left, parent.top, d, parent.height, parent.face | FACE_RIGHT, parent_index)
    right = Section(left.right - 1, parent.top, parent.width - d + 1, parent.height, parent.face | FACE_LEFT, parent_index)
    return left, right


def split_horizontal(parent: Section, parent_index: int, rng: XorShiftRandom):
    d = rng.next_int(SPLIT_MARGIN, parent.height - SPLIT_MARGIN)
    top = Section(parent.left, parent.top, parent.width, d, parent.face | FACE_BOTTOM, parent_index)
    bottom = Section(parent.left, top.bottom - 1, parent.width, parent.height - d + 1, parent.face | FACE_TOP, parent_index)
    return top, bottom


def _divide(sections: List[Section], leaves: List[int], rng: XorShiftRandom) -> None:
    # Stable sort: among equal areas the earliest leaf in the working list wins.
    leaves.sort(key=lambda i: sections[i].area, reverse=True)
    index = leaves.pop(0)
    target = sections[index]
    vertical = target.width > target.height
    extent = target.width if vertical else target.height
    if extent < 2 * SPLIT_MARGIN:
        raise ConfigurationExhausted(
            "room_num",
            f"cannot split a {target.width}x{target.height} region; too many rooms for this grid",
            "exhausted",
        )
    children = split_vertical(target, index, rng) if vertical else split_horizontal(target, index, rng)
    for child in children:
        sections.append(child)
        leaves.append(len(sections) - 1)


def partition(width: int, height: int, room_num: int, rng: XorShiftRandom) -> SectionTree:
    """Split the whole grid until exactly ``room_num`` leaves remain.

    The largest leaf is split each round, so the tree stays roughly balanced
    by area. Raises ConfigurationExhausted when the largest leaf is already
    too small to split.
    """
    sections: List[Section] = [Section(0, 0, width, height)]
    leaves: List[int] = [0]
    for _ in range(room_num - 1):
        _divide(sections, leaves, rng)
    return SectionTree(sections, leaves)


__all__ = [
    "FACE_NONE",
    "FACE_TOP",
    "FACE_LEFT",
    "FACE_RIGHT",
    "FACE_BOTTOM",
    "FACES",
    "NO_PARENT",
    "face_index",
    "Section",
    "SectionTree",
    "split_vertical",
    "split_horizontal",
    "partition",
]
