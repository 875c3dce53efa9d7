# pathviz/core/astar.py
#!/usr/bin/env python3
"""
A* over the 4-connected grid, run to completion.

Heuristic:
- Manhattan distance to the end coordinates (unit edge cost, so h stays
  admissible and consistent).

Tie-breaking in the PQ:
- (f, seq, row, col): lower f, then FIFO by the seq a cell got when it first
  entered the open set. A relaxed cell keeps its seq, so the pop order is the
  same as a stable re-sort of an insertion-ordered open list.
"""

import heapq
from typing import Dict, List, Optional, Set, Tuple

from pathviz.core.types import Cell, Grid, Pos, SearchResult
from pathviz.core.grid_utils import check_endpoints, heuristic, neighbors, reconstruct_path

NAME = "A*"


def run(grid: Grid, start: Cell, end: Cell, end_pos: Optional[Pos] = None) -> SearchResult:
    check_endpoints(grid, start, end)
    er, ec = end_pos if end_pos is not None else end.pos

    visited_order: List[Cell] = []
    open_pq: List[Tuple[float, int, int, int]] = []   # (f, seq, row, col)
    open_seq: Dict[Pos, int] = {}                     # open member -> first insertion seq
    closed: Set[Pos] = set()
    popped = 0

    start.distance = 0
    start.g_score = 0
    start.h_score = heuristic(start.row, start.col, er, ec)
    start.f_score = start.h_score
    open_seq[start.pos] = 0
    heapq.heappush(open_pq, (start.f_score, 0, start.row, start.col))
    seq = 1

    while open_pq:
        f_u, _, r, c = heapq.heappop(open_pq)
        u = grid.cells[r][c]

        # Ignore stale pops (already closed, or f improved since the push)
        if u.pos in closed or f_u != u.f_score:
            continue
        del open_seq[u.pos]
        popped += 1

        if (u.row, u.col) == (er, ec):
            end.predecessor = u.predecessor
            path = reconstruct_path(end)
            return SearchResult(visited_order, path, _metrics(popped, closed, visited_order, path))

        closed.add(u.pos)
        u.visited = True
        if not u.is_endpoint():
            visited_order.append(u)

        for v in neighbors(u, grid):
            if v.pos in closed:
                continue
            alt = u.g_score + 1
            if alt < v.g_score:
                v.predecessor = u
                v.g_score = alt
                v.h_score = heuristic(v.row, v.col, er, ec)
                v.f_score = v.g_score + v.h_score
                if v.pos not in open_seq:
                    open_seq[v.pos] = seq
                    seq += 1
                heapq.heappush(open_pq, (v.f_score, open_seq[v.pos], v.row, v.col))

    return SearchResult(visited_order, None, _metrics(popped, closed, visited_order, None))


def _metrics(popped: int, closed: Set[Pos], visited_order: List[Cell],
             path: Optional[List[Cell]]) -> dict:
    return {
        "algo": NAME,
        "popped": popped,
        "closed_count": len(closed),
        "visited": len(visited_order),
        "path_len": len(path) if path else 0,
    }
