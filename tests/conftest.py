import os
import sys

import pytest

# Ensure repository root importable early (run.py lives there)
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from roguegen import create_app  # noqa: E402
from roguegen.routes.dungeon_api import clear_dungeon_cache  # noqa: E402

GOLDEN_DIR = os.path.join(os.path.dirname(__file__), "golden")


@pytest.fixture(scope="session")
def test_app():
    app = create_app(
        {
            "TESTING": True,
            "DUNGEON_DEFAULT_WIDTH": 70,
            "DUNGEON_DEFAULT_HEIGHT": 40,
            "DUNGEON_DEFAULT_ROOMS": 10,
            "DUNGEON_CACHE_MAX": 4,
        }
    )
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_cache():
    """Seeded maps are cached per process; keep tests independent."""
    clear_dungeon_cache()
    yield
    clear_dungeon_cache()


@pytest.fixture()
def golden_path():
    def _path(name: str) -> str:
        return os.path.join(GOLDEN_DIR, name)

    return _path
