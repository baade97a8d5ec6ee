import logging

from roguegen import create_app
from roguegen import logging_utils
from roguegen.server import _configure_logging


def test_format_key_value_pairs(monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    line = logging_utils._format("info", event="dungeon generated", rooms=10, seed=None)
    parts = line.split(" ")
    assert parts[0] == "level=info"
    assert parts[1].startswith("ts=")
    assert "event=dungeon_generated" in parts
    assert "rooms=10" in parts
    assert not any(p.startswith("seed=") for p in parts)


def test_format_json_mode(monkeypatch):
    import json

    monkeypatch.setattr(logging_utils, "JSON_MODE", True)
    rec = json.loads(logging_utils._format("warn", event="x", field="width"))
    assert rec["level"] == "warn"
    assert rec["event"] == "x"
    assert rec["field"] == "width"


def test_logger_levels_and_streams(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["info"])
    lg = logging_utils.get_logger("roguegen.test")
    assert logging_utils.get_logger("roguegen.test") is lg
    lg.debug(event="hidden")
    lg.info(event="shown")
    lg.error(event="broken")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=shown" in captured.out
    assert "logger=roguegen.test" in captured.out
    assert "event=broken" in captured.err


def test_configure_logging_creates_file(tmp_path):
    app = create_app({"TESTING": True})
    app.instance_path = str(tmp_path)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    root.handlers = []
    try:
        # twice: handlers are replaced, not stacked
        _configure_logging(app)
        log_path = _configure_logging(app)
        assert len(root.handlers) == 2
        logging.getLogger("roguegen.test").info("hello")
        for h in root.handlers:
            h.flush()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
    assert log_path == str(tmp_path / "app.log")
    assert "hello" in (tmp_path / "app.log").read_text()


def test_create_app_defaults_and_overrides(monkeypatch):
    monkeypatch.setenv("DUNGEON_DEFAULT_WIDTH", "80")
    monkeypatch.setenv("DUNGEON_ENABLE_GENERATION_METRICS", "off")
    app = create_app({"DUNGEON_DEFAULT_ROOMS": 12})
    assert app.config["DUNGEON_DEFAULT_WIDTH"] == 80
    assert app.config["DUNGEON_DEFAULT_HEIGHT"] == 40
    assert app.config["DUNGEON_DEFAULT_ROOMS"] == 12
    assert app.config["DUNGEON_ENABLE_GENERATION_METRICS"] is False
    assert "dungeon" in app.blueprints


def test_env_defaults_flow_into_requests(monkeypatch):
    monkeypatch.setenv("DUNGEON_DEFAULT_WIDTH", "40")
    monkeypatch.setenv("DUNGEON_DEFAULT_HEIGHT", "40")
    monkeypatch.setenv("DUNGEON_DEFAULT_ROOMS", "4")
    app = create_app({"TESTING": True})
    data = app.test_client().get("/api/dungeon/map?s=9").get_json()
    assert (data["width"], data["height"], data["room_num"]) == (40, 40, 4)
