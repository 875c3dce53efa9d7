# pathviz/core/grid_utils.py
#!/usr/bin/env python3
"""
Grid helpers shared by every search.

- neighbors(): 4-connected, fixed order up, right, down, left (traversal
  order and tie-breaking depend on it)
- heuristic(): Manhattan distance, admissible for unit-cost 4-moves
- reconstruct_path(): walk predecessors back to the chain's root
"""

from dataclasses import replace
from typing import List

from pathviz.core.types import Cell, Grid, PATH

# (drow, dcol): up, right, down, left
DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def neighbors(cell: Cell, grid: Grid) -> List[Cell]:
    out: List[Cell] = []
    for dr, dc in DIRECTIONS:
        r, c = cell.row + dr, cell.col + dc
        if grid.in_bounds(r, c) and not grid.cells[r][c].is_wall():
            out.append(grid.cells[r][c])
    return out


def heuristic(r1: int, c1: int, r2: int, c2: int) -> int:
    return abs(r1 - r2) + abs(c1 - c2)


def reconstruct_path(end: Cell) -> List[Cell]:
    path: List[Cell] = []
    cur = end
    while cur is not None:
        path.append(cur)
        cur = cur.predecessor
    path.reverse()
    return path


def clone_grid(grid: Grid) -> Grid:
    cells = [[replace(c, predecessor=None) for c in row] for row in grid.cells]
    return Grid(grid.rows, grid.cols, cells)


def all_cells(grid: Grid) -> List[Cell]:
    return [c for row in grid.cells for c in row]


def sort_by_distance(cells: List[Cell]) -> None:
    # list.sort is stable: equal distances keep their input order
    cells.sort(key=lambda c: c.distance)


def is_adjacent_to_path(cell: Cell, grid: Grid) -> bool:
    for dr, dc in DIRECTIONS:
        r, c = cell.row + dr, cell.col + dc
        if grid.in_bounds(r, c) and grid.cells[r][c].kind == PATH:
            return True
    return False


def check_endpoints(grid: Grid, start: Cell, end: Cell) -> None:
    """Raise ValueError unless start/end are open cells that belong to this grid."""
    if grid.rows <= 0 or grid.cols <= 0 or not grid.cells:
        raise ValueError("grid is empty")
    for label, c in (("start", start), ("end", end)):
        if c is None:
            raise ValueError(f"{label} cell is missing")
        if not grid.in_bounds(c.row, c.col):
            raise ValueError(f"{label} {c.pos} out of bounds")
        if grid.cells[c.row][c.col] is not c:
            raise ValueError(f"{label} {c.pos} is not a cell of this grid (pass cells of the cloned grid)")
        if c.is_wall():
            raise ValueError(f"{label} {c.pos} is a wall")
