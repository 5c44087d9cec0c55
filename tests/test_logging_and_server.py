import json
import logging

import pytest

from lightbound import logging_utils
from lightbound.maze import MazeConfig, generate
from lightbound.server import _configure_logging


def test_key_value_format():
    line = logging_utils.format_record("info", event="maze generated", seed=3, exit=None)
    assert line.startswith("level=info ts=")
    assert "event=maze_generated" in line
    assert "seed=3" in line
    assert "exit" not in line


def test_json_mode(monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", True)
    rec = json.loads(logging_utils.format_record("warn", event="x", size=(3, 3)))
    assert rec["level"] == "warn"
    assert rec["event"] == "x"


def test_debug_generation_event_respects_level(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["info"])
    generate(MazeConfig(seed=1))
    assert "maze_generated" not in capsys.readouterr().out
    logging_utils.set_level("debug")
    generate(MazeConfig(seed=1))
    out = capsys.readouterr().out
    assert "event=maze_generated" in out
    assert "logger=lightbound.maze" in out
    assert "seed=1" in out


def test_get_logger_is_cached():
    assert logging_utils.get_logger("a") is logging_utils.get_logger("a")


def test_configure_logging_is_idempotent(tmp_path):
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        _configure_logging(str(tmp_path))
        path = _configure_logging(str(tmp_path))
        handlers = root.handlers
        assert len(handlers) == 2
        logging.getLogger("lightbound.test").info("hello")
        for h in handlers:
            h.flush()
        assert (tmp_path / "app.log").exists()
        assert "hello" in (tmp_path / "app.log").read_text()
        assert path.endswith("app.log")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)


def test_set_level_accepts_alias_and_rejects_unknown(monkeypatch):
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["info"])
    logging_utils.set_level("WARNING")
    assert logging_utils.CURRENT_LEVEL == logging_utils.LEVELS["warn"]
    with pytest.raises(ValueError):
        logging_utils.set_level("verbose")
    assert logging_utils.CURRENT_LEVEL == logging_utils.LEVELS["warn"]
