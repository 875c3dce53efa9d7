# pathviz/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer: paint walls, pick an algorithm, watch the replay

- Mouse (left button, on the board):
    Wall tool    -> click toggles a wall, drag paints walls
    Start / End  -> click or drag moves the marker
- Keyboard:
    [SPACE]      -> visualize
    [C]          -> clear path
    [R]          -> reset board
    [1]/[2]/[3]  -> algorithm (A* / Dijkstra / DFS)
    [W]/[S]/[E]  -> tool (wall / start / end)
    [+]/[-]      -> replay speed
    [Q]/[ESC]    -> quit

Config: see pathviz.app.settings (PATHVIZ_* env vars, --key=value flags).
"""

# --- bootstrap import path so `from pathviz...` works when run as a script ---
import sys
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------

from typing import List, Tuple, Optional
import pygame

from pathviz.app import theme_skin as THEME
from pathviz.app.settings import Settings, resolve_settings
from pathviz.core.types import Grid, SearchResult, create_grid, EMPTY, START, END
from pathviz.core.grid_utils import is_adjacent_to_path
from pathviz.core.maps import available_maps, load_map
from pathviz.core.playback import Playback
from pathviz.core.runner import ALGORITHMS, algorithm_label, run_algorithm

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 26
FONT_NAME = None  # default pygame font

TOOLS = ("wall", "start", "end")
ALGO_KEYS = {pygame.K_1: "astar", pygame.K_2: "dijkstra", pygame.K_3: "dfs"}
TOOL_KEYS = {pygame.K_w: "wall", pygame.K_s: "start", pygame.K_e: "end"}

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)


def initial_grid(settings: Settings) -> Grid:
    """Preset map if one is configured and loads, otherwise an empty board."""
    if settings.map:
        presets = available_maps()
        path = presets.get(settings.map, Path(settings.map))
        try:
            return load_map(path)
        except (OSError, ValueError) as ex:
            print(f"Failed to load map {settings.map}: {ex}")
    return create_grid(settings.rows, settings.cols)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, settings: Settings):
        pygame.init()

        self.settings = settings
        self.grid = grid
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self._auto_cell_size(grid)
        win_w = GRID_MARGIN*2 + grid.cols * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + grid.rows * self.cell_size, 600)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding Visualizer")

        self._buttons: List[UIButton] = []

        self.selected_algo = settings.algo
        self.tool = "wall"
        self.speed = settings.speed
        self.playback: Optional[Playback] = None
        self.result: Optional[SearchResult] = None
        self.state = "Idle"
        self.mouse_down = False
        self._last_painted: Optional[Tuple[int, int]] = None
        self.clock = pygame.time.Clock()

        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(10, min(CELL_SIZE_DEFAULT, target_h // grid.rows))

    def _layout(self, win_w: int, win_h: int):
        """Integer cell_size that fits the window; grid left, panel right."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(6, min(avail_w // self.grid.cols, avail_h // self.grid.rows)))

        grid_plate_w = self.grid.cols * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.rows * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)
        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        if pos[0] < ox or pos[1] < oy or not self.grid.in_bounds(row, col):
            return None
        return (row, col)

    # ---------- main loop ----------
    def run(self):
        while True:
            dt = self.clock.tick(60)
            self._handle_events()
            self._tick_playback(dt)
            self._draw()

    def _tick_playback(self, dt_ms: int):
        if self.playback is None:
            return
        self.playback.speed = self.speed
        self.playback.advance(self.grid, dt_ms)
        if self.playback.done:
            self.playback = None
            self.state = "Done" if self.result and self.result.found else "No path"
            self._refresh_active_states()

    @property
    def busy(self) -> bool:
        return self.playback is not None

    # ---------- actions ----------
    def _visualize(self):
        if self.busy:
            return
        self.grid.clear_path()
        try:
            self.result = run_algorithm(self.selected_algo, self.grid)
        except ValueError as ex:
            print(f"Cannot run {self.selected_algo}: {ex}")
            self.state = "Invalid board"
            return
        self.playback = Playback.from_result(self.result, speed=self.speed)
        self.state = "Running"
        self._refresh_active_states()

    def _cancel_playback(self):
        if self.playback is not None:
            self.playback.cancel()
            self.playback = None

    def _clear_path(self):
        self._cancel_playback()
        self.grid.clear_path()
        self.result = None
        self.state = "Idle"
        self._refresh_active_states()

    def _reset_board(self):
        self._cancel_playback()
        self.grid = initial_grid(self.settings)
        self.result = None
        self.state = "Idle"
        self._layout(*self.screen.get_size())

    def _switch_algo(self, name: str):
        if self.busy or name not in ALGORITHMS:
            return
        self.selected_algo = name
        self._refresh_active_states()

    def _switch_tool(self, tool: str):
        self.tool = tool
        self._refresh_active_states()

    def _bump_speed(self, dv: float):
        self.speed = max(0.25, min(8.0, self.speed * (2.0 if dv > 0 else 0.5)))

    def _paint(self, pos: Tuple[int, int], dragging: bool):
        if self.busy:
            return
        rc = self._cell_at(pos)
        if rc is None:
            return
        row, col = rc
        self._last_painted = rc
        if self.result is not None:
            # editing after a replay wipes the stale overlay
            self.grid.clear_path()
            self.result = None
            self.state = "Idle"
        if self.tool == "start":
            self.grid.move_start(row, col)
        elif self.tool == "end":
            self.grid.move_end(row, col)
        elif dragging:
            self.grid.paint_wall(row, col)
        else:
            self.grid.toggle_wall(row, col)

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._visualize()
                elif e.key == pygame.K_c:
                    self._clear_path()
                elif e.key == pygame.K_r:
                    self._reset_board()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key in ALGO_KEYS:
                    self._switch_algo(ALGO_KEYS[e.key])
                elif e.key in TOOL_KEYS:
                    self._switch_tool(TOOL_KEYS[e.key])
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((max(640, e.w), max(480, e.h)), pygame.RESIZABLE)
                self._layout(*self.screen.get_size())
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                self.mouse_down = True
                self._paint(e.pos, dragging=False)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self.mouse_down = False
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if self.mouse_down and self._cell_at(e.pos) != self._last_painted:
                    self._paint(e.pos, dragging=True)

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        self._draw_grid()
        THEME.glass_panel(self.screen, self._right_band.inflate(-12, -12))
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        for row in self.grid.cells:
            for cell in row:
                rect = pygame.Rect(ox + cell.col*cs, oy + cell.row*cs, cs, cs)
                if cell.kind in (START, END):
                    THEME.draw_cell(self.screen, rect, EMPTY)
                    THEME.draw_badge(self.screen, rect, cell.kind, self.font_small,
                                     ringed=is_adjacent_to_path(cell, self.grid))
                else:
                    THEME.draw_cell(self.screen, rect, cell.kind)

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 20
        y = rb.y + 200  # leaves space for metrics card above
        w = max(160, rb.width - 40)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: str | None = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Visualize", self._visualize, togglable=True, store_as="btn_run"); y += h + gap
        add("Clear Path", self._clear_path); y += h + gap
        add("Reset Board", self._reset_board); y += h + gap

        half = (w - gap) // 2
        self._buttons.append(UIButton("Speed -", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + gap, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap

        self._algo_buttons = {}
        for name in ALGORITHMS:
            add(f"Algo: {algorithm_label(name)}", lambda n=name: self._switch_algo(n), togglable=True)
            self._algo_buttons[name] = self._buttons[-1]; y += h + gap

        self._tool_buttons = {}
        third = (w - 2 * gap) // 3
        for i, tool in enumerate(TOOLS):
            btn = UIButton(tool.title(), pygame.Rect(x + i * (third + gap), y, third, h),
                           lambda t=tool: self._switch_tool(t), togglable=True)
            self._buttons.append(btn)
            self._tool_buttons[tool] = btn

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.busy)
        for name, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(name == self.selected_algo)
        for tool, btn in getattr(self, "_tool_buttons", {}).items():
            btn.set_active(tool == self.tool)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 32, 176), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 16, rb.y + 16))

        x0 = rb.x + 30
        y0 = rb.y + 24

        def line(text, big=False, color=THEME.TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=THEME.ACCENT_GOLD)
        m = self.result.metrics if self.result else {}
        line(f"Algo: {algorithm_label(self.selected_algo)}")
        line(f"Visited: {m.get('visited', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line(f"State: {self.state}")
        line(f"Speed: x{self.speed:g}   Tool: {self.tool}")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    settings = resolve_settings()
    try:
        grid = initial_grid(settings)
    except ValueError as ex:
        print(f"Failed to build the board: {ex}")
        sys.exit(1)
    Viewer(grid, settings).run()

if __name__ == "__main__":
    main()
