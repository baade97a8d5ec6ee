import time

import pytest

from roguegen.dungeon import generate


@pytest.mark.performance
def test_large_map_generation_time():
    start = time.perf_counter()
    d = generate(200, 120, 60, seed=1234)
    elapsed = time.perf_counter() - start
    assert len(d.rooms) == 60
    # generous bound for slow CI machines
    assert elapsed < 5.0, f"generation took {elapsed:.2f}s"
