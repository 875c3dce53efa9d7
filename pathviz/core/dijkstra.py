# pathviz/core/dijkstra.py
#!/usr/bin/env python3

from typing import List, Optional

from pathviz.core.types import Cell, Grid, SearchResult
from pathviz.core.grid_utils import (
    all_cells, check_endpoints, neighbors, reconstruct_path, sort_by_distance,
)

NAME = "Dijkstra"


def run(grid: Grid, start: Cell, end: Cell) -> SearchResult:
    check_endpoints(grid, start, end)

    visited_order: List[Cell] = []
    start.distance = 0

    # Every cell is queued up front; unreachable ones stay at +inf
    unvisited = all_cells(grid)
    popped = 0

    while unvisited:
        sort_by_distance(unvisited)
        u = unvisited.pop(0)

        # Trapped: nothing left is reachable
        if u.distance == float("inf"):
            break

        popped += 1
        u.visited = True
        if not u.is_endpoint():
            visited_order.append(u)

        if u.pos == end.pos:
            end.predecessor = u.predecessor
            path = reconstruct_path(end)
            return SearchResult(visited_order, path, _metrics(popped, visited_order, path))

        _relax_neighbors(u, grid)

    return SearchResult(visited_order, None, _metrics(popped, visited_order, None))


def _relax_neighbors(u: Cell, grid: Grid) -> None:
    for v in neighbors(u, grid):
        if v.visited:
            continue
        alt = u.distance + 1
        if alt < v.distance:
            v.distance = alt
            v.predecessor = u


def _metrics(popped: int, visited_order: List[Cell], path: Optional[List[Cell]]) -> dict:
    return {
        "algo": NAME,
        "popped": popped,
        "closed_count": popped,
        "visited": len(visited_order),
        "path_len": len(path) if path else 0,
    }
