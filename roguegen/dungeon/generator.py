"""Structural generation phases: partition, room placement, carving, corridor routing."""
from __future__ import annotations
from typing import List, NamedTuple, Optional

from .coves import Cove, door_coves, mark_exits, merge_coves, stamp
from .mesh import Mesh
from .rng import XorShiftRandom
from .rooms import Room, place_room
from .sections import Section, SectionTree, partition


class StructuralOutputs(NamedTuple):
    mesh: Mesh
    rooms: List[Room]
    tree: SectionTree
    door_coves: List[Cove]
    merge_coves: List[Cove]


class Generator:
    """Runs the phases in order; each phase method is called exactly once.

    Parameters are expected to be validated already (see ``pipeline``).
    """

    def __init__(self, width: int, height: int, room_num: int, seed: int):
        self.width = width
        self.height = height
        self.room_num = room_num
        self.seed = seed
        self.rng = XorShiftRandom(seed)
        self.mesh = Mesh(width, height)
        self.tree: Optional[SectionTree] = None
        self.rooms: List[Room] = []
        self.door_coves: List[Cove] = []
        self.merge_coves: List[Cove] = []

    def section_of(self, room: Room) -> Section:
        return self.tree.sections[room.section]

    def partition(self) -> SectionTree:
        self.tree = partition(self.width, self.height, self.room_num, self.rng)
        return self.tree

    def place_rooms(self) -> List[Room]:
        sections = self.tree.sections
        self.rooms = [place_room(sections[i], i, self.rng) for i in self.tree.leaves]
        return self.rooms

    def carve_rooms(self) -> None:
        # Each room is carved, then its section outline and door exits are marked.
        for room in self.rooms:
            self.mesh.carve_room(room)
            mark_exits(self.mesh, room, self.section_of(room))

    def route_door_coves(self) -> List[Cove]:
        for room in self.rooms:
            self.door_coves.extend(door_coves(room, self.section_of(room)))
        stamp(self.mesh, self.door_coves)
        return self.door_coves

    def merge_sibling_coves(self) -> List[Cove]:
        self.merge_coves = merge_coves(self.mesh, self.tree.sections)
        stamp(self.mesh, self.merge_coves)
        return self.merge_coves

    def finalize(self) -> int:
        return self.mesh.clear_temporary()

    def run(self) -> StructuralOutputs:
        self.partition()
        self.place_rooms()
        self.carve_rooms()
        self.route_door_coves()
        self.merge_sibling_coves()
        self.finalize()
        return StructuralOutputs(self.mesh, self.rooms, self.tree, self.door_coves, self.merge_coves)
