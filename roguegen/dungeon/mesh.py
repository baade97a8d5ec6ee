"""Flat row-major cell grid the generator carves into."""
from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from .rooms import Room
from .sections import FACE_BOTTOM, FACE_LEFT, FACE_RIGHT, FACE_TOP, Section
from .tiles import BLANK, DOOR, FLOOR, HWALL, TEMPORARY, VWALL


class Mesh:
    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int, fill: int = BLANK):
        self.width = width
        self.height = height
        self.cells: List[int] = [fill] * (width * height)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def index(self, x: int, y: int) -> int:
        return x + y * self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.cells[x + y * self.width]

    def set(self, x: int, y: int, code: int) -> None:
        self.cells[x + y * self.width] = code

    def fill(self, coords: Iterable[Tuple[int, int]], code: int) -> None:
        for x, y in coords:
            self.cells[x + y * self.width] = code

    def rows(self) -> Iterator[List[int]]:
        for y in range(self.height):
            yield self.cells[y * self.width:(y + 1) * self.width]

    def count(self, code: int) -> int:
        return self.cells.count(code)

    def carve_room(self, room: Room) -> None:
        for x, y in room.cells():
            if x == room.left or x == room.right - 1:
                self.set(x, y, VWALL)
            elif y == room.top or y == room.bottom - 1:
                self.set(x, y, HWALL)
            else:
                self.set(x, y, FLOOR)
        if room.has_door(FACE_RIGHT):
            self.set(room.right - 1, room.door_pos(FACE_RIGHT), DOOR)
        if room.has_door(FACE_LEFT):
            self.set(room.left, room.door_pos(FACE_LEFT), DOOR)
        if room.has_door(FACE_TOP):
            self.set(room.door_pos(FACE_TOP), room.top, DOOR)
        if room.has_door(FACE_BOTTOM):
            self.set(room.door_pos(FACE_BOTTOM), room.bottom - 1, DOOR)

    def mark_section(self, section: Section) -> None:
        """Outline a section's perimeter with TEMPORARY markers."""
        for x in range(section.left, section.right):
            self.set(x, section.top, TEMPORARY)
            self.set(x, section.bottom - 1, TEMPORARY)
        for y in range(section.top, section.bottom):
            self.set(section.left, y, TEMPORARY)
            self.set(section.right - 1, y, TEMPORARY)

    def probe(self, x: int, y: int, dx: int, dy: int) -> int:
        """Mark cells TEMPORARY from (x, y) stepping by (dx, dy).

        Stops on the first cell that is already TEMPORARY or at the grid
        edge. Returns the number of cells marked.
        """
        marked = 0
        while self.in_bounds(x, y) and self.get(x, y) != TEMPORARY:
            self.set(x, y, TEMPORARY)
            marked += 1
            x += dx
            y += dy
        return marked

    def clear_temporary(self) -> int:
        cleared = 0
        for i, code in enumerate(self.cells):
            if code == TEMPORARY:
                self.cells[i] = BLANK
                cleared += 1
        return cleared

    def to_list(self) -> List[int]:
        return list(self.cells)
