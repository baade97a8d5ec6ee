from dataclasses import dataclass
from typing import Optional

MIN_ROOM_SIZE = 5
# Smallest offset of a split line from either edge of the section being split.
SPLIT_MARGIN = MIN_ROOM_SIZE + 3
# Upper bound for the pair-drawing loops in room placement.
MAX_PLACEMENT_ATTEMPTS = 1000


@dataclass
class DungeonConfig:
    width: int = 70
    height: int = 40
    room_num: int = 10
    seed: Optional[int] = None


__all__ = ["DungeonConfig", "MIN_ROOM_SIZE", "SPLIT_MARGIN", "MAX_PLACEMENT_ATTEMPTS"]
