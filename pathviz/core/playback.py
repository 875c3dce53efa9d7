# pathviz/core/playback.py
#!/usr/bin/env python3
"""
Timed replay of a SearchResult onto the displayed grid.

Frames are laid out up front:
- visited cell i   at  visit_delay * i
- path cell i      at  visit_delay * len(visited) + path_delay * i

The viewer calls advance() from its frame loop with the elapsed time. cancel()
drops whatever has not been shown yet; cells already painted stay as they are.
"""

from dataclasses import dataclass, field
from typing import List

from pathviz.core.types import Grid, SearchResult, VISITED, PATH

VISIT_DELAY_MS = 10
PATH_DELAY_MS = 50


@dataclass
class Frame:
    at_ms: float
    row: int
    col: int
    kind: str


@dataclass
class Playback:
    frames: List[Frame] = field(default_factory=list)
    total_ms: float = 0.0
    speed: float = 1.0
    elapsed_ms: float = 0.0
    cursor: int = 0
    cancelled: bool = False

    @classmethod
    def from_result(cls, result: SearchResult, *, visit_delay: float = VISIT_DELAY_MS,
                    path_delay: float = PATH_DELAY_MS, speed: float = 1.0) -> "Playback":
        frames: List[Frame] = []
        for i, c in enumerate(result.visited_order):
            frames.append(Frame(visit_delay * i, c.row, c.col, VISITED))
        path_t0 = visit_delay * len(result.visited_order)
        for i, c in enumerate(result.path or []):
            frames.append(Frame(path_t0 + path_delay * i, c.row, c.col, PATH))
        total = path_t0 + (path_delay * len(result.path) if result.path else 0)
        return cls(frames=frames, total_ms=total, speed=speed)

    @property
    def done(self) -> bool:
        return self.cancelled or self.elapsed_ms >= self.total_ms and self.cursor >= len(self.frames)

    @property
    def progress(self) -> float:
        if self.done or self.total_ms <= 0:
            return 1.0
        return min(1.0, self.elapsed_ms / self.total_ms)

    def advance(self, grid: Grid, dt_ms: float) -> int:
        """Move the clock by dt_ms (scaled by speed) and paint every frame now due."""
        if self.cancelled:
            return 0
        self.elapsed_ms += dt_ms * self.speed
        applied = 0
        while self.cursor < len(self.frames) and self.frames[self.cursor].at_ms <= self.elapsed_ms:
            f = self.frames[self.cursor]
            self.cursor += 1
            applied += 1
            if not grid.in_bounds(f.row, f.col):
                continue
            cell = grid.cells[f.row][f.col]
            # start/end markers are drawn by the viewer; walls may have been painted since the run
            if cell.is_endpoint() or cell.is_wall():
                continue
            cell.kind = f.kind
        return applied

    def finish(self, grid: Grid) -> int:
        """Paint all remaining frames at once."""
        self.elapsed_ms = max(self.elapsed_ms, self.total_ms)
        return self.advance(grid, 0)

    def cancel(self) -> None:
        self.cancelled = True
        self.cursor = len(self.frames)
