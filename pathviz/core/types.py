# pathviz/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple, Optional, Dict, Any

Pos = Tuple[int, int]  # (row, col)

# Cell kinds
EMPTY   = "empty"
WALL    = "wall"
START   = "start"
END     = "end"
VISITED = "visited"
PATH    = "path"
KINDS   = (EMPTY, WALL, START, END, VISITED, PATH)

# Default board dimensions
ROWS = 20
COLS = 30


@dataclass
class Cell:
    row: int
    col: int
    kind: str = EMPTY
    visited: bool = False
    distance: float = inf
    g_score: float = inf
    h_score: float = inf
    f_score: float = inf
    predecessor: Optional["Cell"] = field(default=None, repr=False, compare=False)

    @property
    def pos(self) -> Pos:
        return (self.row, self.col)

    def is_wall(self) -> bool:
        return self.kind == WALL

    def is_endpoint(self) -> bool:
        return self.kind in (START, END)

    def reset_search(self) -> None:
        """Drop every field a search run writes."""
        self.visited = False
        self.distance = inf
        self.g_score = inf
        self.h_score = inf
        self.f_score = inf
        self.predecessor = None


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[Cell]]             # [row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise ValueError(f"({row}, {col}) is outside the {self.rows}x{self.cols} grid")
        return self.cells[row][col]

    def find(self, kind: str) -> List[Cell]:
        return [c for r in self.cells for c in r if c.kind == kind]

    def start_cell(self) -> Cell:
        return self._single(START)

    def end_cell(self) -> Cell:
        return self._single(END)

    def _single(self, kind: str) -> Cell:
        found = self.find(kind)
        if len(found) != 1:
            raise ValueError(f"grid must hold exactly one {kind} cell, found {len(found)}")
        return found[0]

    def validate(self) -> None:
        """Fail fast on grids no algorithm can run against."""
        if self.rows <= 0 or self.cols <= 0 or not self.cells:
            raise ValueError("grid is empty")
        if len(self.cells) != self.rows or any(len(r) != self.cols for r in self.cells):
            raise ValueError("cells size mismatch")
        self.start_cell()
        self.end_cell()

    # -------------------- editing --------------------

    def toggle_wall(self, row: int, col: int) -> None:
        c = self.at(row, col)
        if c.is_endpoint():
            return
        c.kind = EMPTY if c.kind == WALL else WALL

    def paint_wall(self, row: int, col: int) -> None:
        c = self.at(row, col)
        if not c.is_endpoint():
            c.kind = WALL

    def move_start(self, row: int, col: int) -> None:
        self._move_marker(START, row, col)

    def move_end(self, row: int, col: int) -> None:
        self._move_marker(END, row, col)

    def _move_marker(self, kind: str, row: int, col: int) -> None:
        target = self.at(row, col)
        other = END if kind == START else START
        if target.kind == other:
            return
        for c in self.find(kind):
            c.kind = EMPTY
        target.kind = kind

    def clear_path(self) -> None:
        """Erase the last replay: visited/path cells go back to empty, search state is dropped."""
        for r in self.cells:
            for c in r:
                if c.kind in (VISITED, PATH):
                    c.kind = EMPTY
                c.reset_search()


@dataclass
class SearchResult:
    visited_order: List[Cell] = field(default_factory=list)
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.path is not None


def create_grid(rows: int = ROWS, cols: int = COLS) -> Grid:
    """Empty board with the default start/end markers on the middle row."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    start = (rows // 2, cols // 5)
    end = (rows // 2, (cols * 4) // 5)
    if start == end:
        raise ValueError(f"a {rows}x{cols} grid is too narrow for separate start/end markers")
    cells = [[Cell(r, c) for c in range(cols)] for r in range(rows)]
    cells[start[0]][start[1]].kind = START
    cells[end[0]][end[1]].kind = END
    return Grid(rows, cols, cells)
