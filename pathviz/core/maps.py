# pathviz/core/maps.py
#!/usr/bin/env python3
"""
Preset boards stored as JSON:

    {"rows": 5, "cols": 7, "start": [2, 1], "end": [2, 5],
     "cells": [[0, 0, 1, ...], ...]}        # 1 = wall, [row][col]
"""

import json
from pathlib import Path
from typing import Dict

from pathviz.core.types import Cell, Grid, EMPTY, WALL, START, END

MAP_DIR = Path(__file__).resolve().parents[2] / "maps"


def available_maps(map_dir: Path = MAP_DIR) -> Dict[str, Path]:
    if not map_dir.is_dir():
        return {}
    return {p.stem: p for p in sorted(map_dir.glob("*.json"))}


def load_map(path: Path) -> Grid:
    with open(path, "r") as f:
        data = json.load(f)
    try:
        rows  = int(data["rows"])
        cols  = int(data["cols"])
        start = tuple(int(v) for v in data["start"])
        end   = tuple(int(v) for v in data["end"])
        cells = data["cells"]
    except (KeyError, TypeError, ValueError) as ex:
        raise ValueError(f"{path}: malformed map ({ex})") from ex

    if rows <= 0 or cols <= 0:
        raise ValueError(f"{path}: grid dimensions must be positive")
    if len(cells) != rows or any(len(r) != cols for r in cells):
        raise ValueError(f"{path}: cells size mismatch")
    sr, sc = start; er, ec = end
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise ValueError(f"{path}: start out of bounds")
    if not (0 <= er < rows and 0 <= ec < cols):
        raise ValueError(f"{path}: end out of bounds")
    if start == end:
        raise ValueError(f"{path}: start and end share a cell")
    if cells[sr][sc] == 1 or cells[er][ec] == 1:
        raise ValueError(f"{path}: start/end placed on a wall")

    grid = Grid(rows, cols, [
        [Cell(r, c, WALL if v == 1 else EMPTY) for c, v in enumerate(row)]
        for r, row in enumerate(cells)
    ])
    grid.cells[sr][sc].kind = START
    grid.cells[er][ec].kind = END
    return grid
