"""
Shared fixtures: build grids from ASCII art.

    S . #      S = start, E = end, # = wall, . = empty
    . . E
"""

from typing import List, Tuple

import pytest

from pathviz.core.types import Cell, Grid, EMPTY, WALL, START, END

_KINDS = {".": EMPTY, "#": WALL, "S": START, "E": END}


def grid_from_ascii(art: str) -> Grid:
    lines = [ln.split() for ln in art.strip().splitlines()]
    rows, cols = len(lines), len(lines[0])
    cells = [[Cell(r, c, _KINDS[ch]) for c, ch in enumerate(line)] for r, line in enumerate(lines)]
    return Grid(rows, cols, cells)


def endpoints(grid: Grid) -> Tuple[Cell, Cell]:
    return grid.start_cell(), grid.end_cell()


def positions(cells: List[Cell]) -> List[Tuple[int, int]]:
    return [c.pos for c in cells]


@pytest.fixture
def open_3x3() -> Grid:
    return grid_from_ascii("""
        . . .
        S . E
        . . .
    """)


@pytest.fixture
def corridor_3x3() -> Grid:
    return grid_from_ascii("""
        . # .
        S . E
        . # .
    """)


@pytest.fixture
def enclosed_end() -> Grid:
    return grid_from_ascii("""
        . . . . . .
        . . . # # #
        S . . # E #
        . . . # # #
    """)


@pytest.fixture
def maze() -> Grid:
    return grid_from_ascii("""
        S . . # . . .
        # # . # . # .
        . . . . . # .
        . # # # . # .
        . . . # . . E
    """)
