import importlib.util
import json
import os

from lightbound.maze import MazeConfig, generate
from lightbound.maze.diagnostics import analyze, flood_from_start, issues

from maze_test_utils import maze_from_ascii


def test_generated_maze_is_clean():
    maze = generate(MazeConfig(seed=5, width=21, height=21, max_recursion=500))
    report = analyze(maze)
    assert all(v == 0 for v in issues(report).values()), report


def test_broken_maze_is_flagged():
    maze = maze_from_ascii(
        [
            "#####",
            "#E#.#",
            "#S#..",
            "#####",
        ]
    )
    report = analyze(maze)
    assert report["open_border"] == [(4, 1)]
    assert (3, 2) in report["unreachable"]
    assert flood_from_start(maze) == {(1, 1), (1, 2)}
    assert issues(report)["unreachable"] == 3


def _load_script():
    path = os.path.join(os.path.dirname(__file__), "..", "scripts", "diagnose_seeds.py")
    spec = importlib.util.spec_from_file_location("diagnose_seeds", path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_diagnose_script_reports_ok(capsys):
    mod = _load_script()
    assert mod.main(["7", "8"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["seed"] for r in data["results"]] == [7, 8]
    assert all(r["ok"] for r in data["results"])
