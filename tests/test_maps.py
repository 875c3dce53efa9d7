"""
Tests for the JSON preset loader and the bundled maps.
"""

import json

import pytest

from pathviz.core.maps import available_maps, load_map
from pathviz.core.runner import ALGORITHMS, run_algorithm
from pathviz.core.types import END, START, WALL


def write_map(tmp_path, **overrides):
    data = {
        "rows": 2, "cols": 3,
        "start": [0, 0], "end": [1, 2],
        "cells": [[0, 1, 0], [0, 0, 0]],
    }
    data.update(overrides)
    path = tmp_path / "board.json"
    path.write_text(json.dumps(data))
    return path


def test_bundled_maps_are_listed() -> None:
    assert {"01_wall_gap", "02_zigzag", "03_enclosed"} <= set(available_maps())


@pytest.mark.parametrize("key", ["01_wall_gap", "02_zigzag", "03_enclosed"])
def test_bundled_maps_load_and_validate(key) -> None:
    grid = load_map(available_maps()[key])
    grid.validate()
    assert (grid.rows, grid.cols) == (20, 30)


def test_wall_gap_forces_the_detour() -> None:
    grid = load_map(available_maps()["01_wall_gap"])
    for name in ("astar", "dijkstra"):
        result = run_algorithm(name, grid)
        assert len(result.path) == 35
        assert (2, 15) in [c.pos for c in result.path]


@pytest.mark.parametrize("name", list(ALGORITHMS))
def test_enclosed_map_has_no_path(name) -> None:
    grid = load_map(available_maps()["03_enclosed"])
    assert run_algorithm(name, grid).path is None


def test_load_custom_map(tmp_path) -> None:
    grid = load_map(write_map(tmp_path))
    assert grid.at(0, 0).kind == START
    assert grid.at(1, 2).kind == END
    assert grid.at(0, 1).kind == WALL


@pytest.mark.parametrize("overrides,message", [
    ({"cells": [[0, 0, 0]]}, "size mismatch"),
    ({"start": [5, 0]}, "start out of bounds"),
    ({"end": [1, 3]}, "end out of bounds"),
    ({"end": [0, 0]}, "share a cell"),
    ({"start": [0, 1]}, "wall"),
    ({"rows": 0, "cells": []}, "positive"),
    ({"start": "nowhere"}, "malformed"),
])
def test_bad_maps_fail_fast(tmp_path, overrides, message) -> None:
    with pytest.raises(ValueError, match=message):
        load_map(write_map(tmp_path, **overrides))


def test_missing_key(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"rows": 1}))
    with pytest.raises(ValueError, match="malformed"):
        load_map(path)
