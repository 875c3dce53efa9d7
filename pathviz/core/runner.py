# pathviz/core/runner.py
#!/usr/bin/env python3
"""
Run one search on a private copy of the displayed grid.

    result = run_algorithm("astar", grid)

The grid is validated, cloned, and the endpoints are looked up in the clone,
so the caller's grid is never touched and result cells belong to the clone.
"""

from typing import Callable, Dict, Tuple

from pathviz.core import astar, dfs, dijkstra
from pathviz.core.types import Grid, SearchResult
from pathviz.core.grid_utils import clone_grid

# name -> (label, runner(grid, start, end))
ALGORITHMS: Dict[str, Tuple[str, Callable[..., SearchResult]]] = {
    "astar":    (astar.NAME,    lambda g, s, e: astar.run(g, s, e, e.pos)),
    "dijkstra": (dijkstra.NAME, dijkstra.run),
    "dfs":      (dfs.NAME,      dfs.run),
}
DEFAULT_ALGORITHM = "astar"


def algorithm_label(name: str) -> str:
    return _lookup(name)[0]


def run_algorithm(name: str, grid: Grid) -> SearchResult:
    _, runner = _lookup(name)
    grid.validate()
    work = clone_grid(grid)
    start = work.start_cell()
    end = work.end_cell()
    return runner(work, start, end)


def _lookup(name: str):
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown algorithm {name!r} (choose from {', '.join(ALGORITHMS)})") from None
