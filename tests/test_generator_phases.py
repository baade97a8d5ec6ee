"""Phase-level checks for Generator and the Dungeon wrapper around it."""
from roguegen.dungeon import CORRIDOR, TEMPORARY, Dungeon, DungeonConfig, generate
from roguegen.dungeon.generator import Generator


def test_run_matches_pipeline():
    out = Generator(70, 40, 10, 42).run()
    d = generate(70, 40, 10, seed=42)
    assert out.mesh.to_list() == d.mesh
    assert tuple(out.rooms) == d.rooms
    assert tuple(out.tree.leaves) == d.leaves
    assert len(out.door_coves) == d.metrics["door_coves"]
    assert len(out.merge_coves) == d.metrics["merge_coves"]


def test_phases_build_up_the_mesh():
    gen = Generator(40, 40, 4, 9)
    tree = gen.partition()
    assert len(tree.leaves) == 4
    rooms = gen.place_rooms()
    assert [r.section for r in rooms] == list(tree.leaves)
    gen.carve_rooms()
    assert gen.mesh.count(TEMPORARY) > 0
    assert gen.mesh.count(CORRIDOR) == 0
    coves = gen.route_door_coves()
    assert len(coves) == sum(len(list(r.door_faces())) for r in rooms)
    assert gen.mesh.count(CORRIDOR) > 0
    gen.merge_sibling_coves()
    cleared = gen.finalize()
    assert cleared > 0
    assert gen.mesh.count(TEMPORARY) == 0


def test_from_config_and_accessors():
    d = Dungeon.from_config(DungeonConfig(width=60, height=30, room_num=6, seed=5))
    assert d.size == (60, 30)
    assert d.seed == 5
    room = d.rooms[0]
    assert d.cell(room.left + 1, room.top + 1) == ord(".")
    assert d.mesh == generate(60, 30, 6, seed=5).mesh


def test_from_config_without_metrics():
    d = Dungeon.from_config(DungeonConfig(seed=1), enable_metrics=False)
    assert d.metrics == {}
    assert (d.width, d.height, d.room_num) == (70, 40, 10)
