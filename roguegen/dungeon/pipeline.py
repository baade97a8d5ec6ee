"""Pipeline orchestration for dungeon generation.

Provides the public Dungeon class used by the HTTP layer and the CLI. It
validates the request, resolves the seed, then drives ``Generator`` through
its phases in a fixed order, recording per-phase timings when metrics are
enabled:

    partition -> place_rooms -> carve_rooms -> route_door_coves
    -> merge_sibling_coves -> finalize
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import os
import time

from flask import current_app, has_app_context

from ..logging_utils import get_logger
from .config import DungeonConfig
from .errors import InvalidParameter
from .generator import Generator
from .metrics import init_metrics
from .rooms import Room
from .sections import Section
from .tiles import CORRIDOR

log = get_logger("roguegen.dungeon")


def _require_int(name: str, value: Any, minimum: int) -> None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(name, f"{name} must be an integer", "type")
    if value < minimum:
        raise InvalidParameter(name, f"{name} must be >= {minimum}", "min")


def validate_params(width: Any, height: Any, room_num: Any, seed: Any = None) -> None:
    _require_int("width", width, 1)
    _require_int("height", height, 1)
    _require_int("room_num", room_num, 1)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidParameter("seed", "seed must be an integer", "type")


def clock_seed() -> int:
    """Wall-clock seed in milliseconds, as the map service always used."""
    return int(time.time() * 1000)


@dataclass
class Dungeon:
    width: int = 70
    height: int = 40
    room_num: int = 10
    seed: Optional[int] = None
    enable_metrics: bool = True
    mesh: List[int] = field(init=False, repr=False)
    rooms: Tuple[Room, ...] = field(init=False, repr=False)
    sections: Tuple[Section, ...] = field(init=False, repr=False)
    leaves: Tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self):
        validate_params(self.width, self.height, self.room_num, self.seed)
        # 0 is a valid deterministic seed; None => wall clock
        if self.seed is None:
            self.seed = clock_seed()
        if 'DUNGEON_ENABLE_GENERATION_METRICS' in os.environ:
            val = os.environ.get('DUNGEON_ENABLE_GENERATION_METRICS', '').lower()
            self.enable_metrics = val not in {'0', 'false', 'no', ''}
        if has_app_context() and 'DUNGEON_ENABLE_GENERATION_METRICS' in current_app.config:
            self.enable_metrics = bool(current_app.config['DUNGEON_ENABLE_GENERATION_METRICS'])
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self._run_pipeline()

    @classmethod
    def from_config(cls, config: DungeonConfig, enable_metrics: bool = True) -> "Dungeon":
        return cls(config.width, config.height, config.room_num, config.seed, enable_metrics)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def leaf_sections(self) -> List[Section]:
        return [self.sections[i] for i in self.leaves]

    def section_of(self, room: Room) -> Section:
        return self.sections[room.section]

    def cell(self, x: int, y: int) -> int:
        return self.mesh[x + y * self.width]

    def _run_pipeline(self):
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = int((time.perf_counter() - ps) * 1000)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        gen = Generator(self.width, self.height, self.room_num, self.seed)
        tree = _phase('partition', gen.partition)
        rooms = _phase('place_rooms', gen.place_rooms)
        _phase('carve_rooms', gen.carve_rooms)
        door_coves = _phase('route_door_coves', gen.route_door_coves)
        merge_coves = _phase('merge_sibling_coves', gen.merge_sibling_coves)
        cleared = _phase('finalize', gen.finalize)

        self.mesh = gen.mesh.to_list()
        self.rooms = tuple(rooms)
        self.sections = tuple(tree.sections)
        self.leaves = tuple(tree.leaves)

        if self.enable_metrics:
            self.metrics['sections'] = len(self.sections)
            self.metrics['rooms'] = len(self.rooms)
            self.metrics['doors'] = sum(len(list(r.door_faces())) for r in self.rooms)
            self.metrics['door_coves'] = len(door_coves)
            self.metrics['merge_coves'] = len(merge_coves)
            self.metrics['corridor_cells'] = self.mesh.count(CORRIDOR)
            self.metrics['temporary_cleared'] = cleared
            self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
            self.metrics['phase_ms'] = phase_times
        log.debug(
            event="dungeon_generated",
            width=self.width,
            height=self.height,
            rooms=len(self.rooms),
            seed=self.seed,
            runtime_ms=self.metrics.get('runtime_ms'),
        )


def generate(width: int, height: int, room_num: int, seed: Optional[int] = None) -> Dungeon:
    return Dungeon(width=width, height=height, room_num=room_num, seed=seed)


__all__ = ["Dungeon", "generate", "validate_params", "clock_seed"]
