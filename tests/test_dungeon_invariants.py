"""Dungeon generation invariant tests.

Structural properties every generated map must satisfy:
1. Exactly room_num leaf sections, one room strictly inside each.
2. Rooms never overlap.
3. A room has a door on a face iff its section joins a sibling on that face.
4. No TEMPORARY marker survives generation.
5. Every room is reachable from every other over FLOOR/DOOR/CORRIDOR.
"""

from __future__ import annotations

import pytest

from roguegen.dungeon import FACE_BOTTOM, FACE_LEFT, FACE_RIGHT, FACE_TOP, Dungeon
from roguegen.dungeon.tiles import CELL_CHARS, CORRIDOR, DOOR, TEMPORARY

from tests.dungeon_test_utils import WALKABLE, cell, door_cells, unreachable_rooms

CASES = [
    (70, 40, 10),
    (80, 50, 12),
    (40, 40, 4),
    (60, 30, 6),
    (100, 100, 20),
    (17, 17, 2),
]
SEEDS = [1, 7, 42, 99, 2024]


def gen(size, seed) -> Dungeon:
    w, h, n = size
    return Dungeon(width=w, height=h, room_num=n, seed=seed)


@pytest.mark.parametrize("size", CASES)
@pytest.mark.parametrize("seed", SEEDS)
def test_one_room_per_leaf(size, seed):
    d = gen(size, seed)
    assert len(d.leaves) == size[2]
    assert len(d.rooms) == size[2]
    assert sorted(r.section for r in d.rooms) == sorted(d.leaves)
    for r in d.rooms:
        s = d.section_of(r)
        assert s.left < r.left and r.right < s.right
        assert s.top < r.top and r.bottom < s.bottom


@pytest.mark.parametrize("size", CASES)
@pytest.mark.parametrize("seed", SEEDS)
def test_rooms_do_not_overlap(size, seed):
    d = gen(size, seed)
    for i, a in enumerate(d.rooms):
        for b in d.rooms[i + 1:]:
            assert not a.intersects(b), f"rooms {a} and {b} overlap (seed={seed})"


@pytest.mark.parametrize("size", CASES)
@pytest.mark.parametrize("seed", SEEDS)
def test_doors_match_section_faces(size, seed):
    d = gen(size, seed)
    for r in d.rooms:
        s = d.section_of(r)
        for face in (FACE_TOP, FACE_LEFT, FACE_RIGHT, FACE_BOTTOM):
            assert r.has_door(face) == s.has_face(face)
        for _face, x, y in door_cells(r):
            assert cell(d, x, y) == DOOR


@pytest.mark.parametrize("size", CASES)
@pytest.mark.parametrize("seed", SEEDS)
def test_no_temporary_cells_and_known_codes(size, seed):
    d = gen(size, seed)
    assert len(d.mesh) == size[0] * size[1]
    assert TEMPORARY not in d.mesh
    assert set(d.mesh) <= set(CELL_CHARS)


@pytest.mark.parametrize("size", CASES)
@pytest.mark.parametrize("seed", SEEDS)
def test_all_rooms_connected(size, seed):
    d = gen(size, seed)
    assert unreachable_rooms(d) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_every_door_opens_onto_corridor(seed):
    d = gen((70, 40, 10), seed)
    for r in d.rooms:
        for face, x, y in door_cells(r):
            dx, dy = {FACE_LEFT: (-1, 0), FACE_RIGHT: (1, 0), FACE_TOP: (0, -1), FACE_BOTTOM: (0, 1)}[face]
            assert cell(d, x + dx, y + dy) == CORRIDOR
            assert cell(d, x - dx, y - dy) in WALKABLE
