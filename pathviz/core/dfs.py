# pathviz/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search. Finds *a* path, not the shortest one.

Cells are marked seen when pushed, so each cell enters the stack at most once
and keeps the predecessor it was pushed from.
"""

from typing import List, Optional, Set

from pathviz.core.types import Cell, Grid, Pos, SearchResult
from pathviz.core.grid_utils import check_endpoints, neighbors, reconstruct_path

NAME = "DFS"


def run(grid: Grid, start: Cell, end: Cell) -> SearchResult:
    check_endpoints(grid, start, end)

    visited_order: List[Cell] = []
    stack: List[Cell] = [start]
    seen: Set[Pos] = {start.pos}
    popped = 0

    while stack:
        u = stack.pop()
        popped += 1

        if u.pos == end.pos:
            end.predecessor = u.predecessor
            path = reconstruct_path(end)
            return SearchResult(visited_order, path, _metrics(popped, visited_order, path))

        u.visited = True
        if not u.is_endpoint():
            visited_order.append(u)

        for v in neighbors(u, grid):
            if v.pos not in seen:
                seen.add(v.pos)
                v.predecessor = u
                stack.append(v)

    return SearchResult(visited_order, None, _metrics(popped, visited_order, None))


def _metrics(popped: int, visited_order: List[Cell], path: Optional[List[Cell]]) -> dict:
    return {
        "algo": NAME,
        "popped": popped,
        "closed_count": len(visited_order),
        "visited": len(visited_order),
        "path_len": len(path) if path else 0,
    }
