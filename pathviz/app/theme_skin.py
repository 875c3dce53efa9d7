# pathviz/app/theme_skin.py
"""
Board skin (visuals only; no logic)
- Backdrop: dark vertical gradient, cached per window size
- Cells: flat colors per kind, thin dark borders, pulsing visited overlay
- Start/End: round badges; gold ring when the replayed path touches them
- Right Panel: frosted glass underlay (viewer draws buttons/metrics on top)
"""

from __future__ import annotations
import math, time
from typing import Tuple
import pygame

from pathviz.core.types import EMPTY, WALL, START, END, VISITED, PATH

# ---- palette ----
WHITE         = (255, 255, 255)
TEXT_LIGHT    = (230, 235, 240)
ACCENT_GOLD   = (255, 210, 0)
GRID_LINE     = (60, 66, 80)

KIND_COLORS = {
    EMPTY:   (236, 239, 244),
    WALL:    (38, 42, 52),
    START:   (46, 170, 90),
    END:     (220, 50, 47),
    VISITED: (120, 170, 230),
    PATH:    (250, 204, 21),
}

# panel colors
PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)

# caches
_backdrop_by_size: dict[Tuple[int, int], pygame.Surface] = {}

# ---------- helpers ----------
def cell_color(kind: str) -> Tuple[int, int, int]:
    return KIND_COLORS.get(kind, KIND_COLORS[EMPTY])

def _rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)

def glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    _rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    _rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), fill_rgba, radius=20)
    # subtle top sheen
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, (255,255,255,18), hi.get_rect(), border_radius=18)
    card.blit(hi, (0,0))
    screen.blit(card, rect.topleft)

def draw_backdrop(screen: pygame.Surface):
    """Gradient backdrop, cached by window size."""
    w, h = screen.get_size()
    key = (w, h)
    if key not in _backdrop_by_size:
        surf = pygame.Surface((w, h))
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(surf, c, (0, y), (w, y))
        _backdrop_by_size.clear()
        _backdrop_by_size[key] = surf
    screen.blit(_backdrop_by_size[key], (0, 0))

def draw_cell(screen: pygame.Surface, rect: pygame.Rect, kind: str):
    if kind == VISITED:
        # slow pulse between two blues while the replay runs
        k = 0.5 * (1.0 + math.sin(time.time() * 3.0))
        a = KIND_COLORS[VISITED]; b = (150, 195, 245)
        color = tuple(int(a[i] * (1 - k) + b[i] * k) for i in range(3))
    else:
        color = cell_color(kind)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, GRID_LINE, rect, 1)

def draw_badge(screen: pygame.Surface, rect: pygame.Rect, kind: str, font: pygame.font.Font,
               ringed: bool = False):
    cx, cy = rect.center
    radius = max(5, rect.width // 2 - 2)
    pygame.draw.circle(screen, cell_color(kind), (cx, cy), radius)
    if ringed:
        pygame.draw.circle(screen, ACCENT_GOLD, (cx, cy), radius + 1, 2)
    txt = font.render("S" if kind == START else "E", True, WHITE)
    screen.blit(txt, txt.get_rect(center=(cx, cy)))
