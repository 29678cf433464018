"""
Rendering helpers: turn a RenderFeed into pixels.

- Pre-render the static background (grid + side panel) once per Dims.
- Pre-render one cell sprite per piece kind and blit it.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple
from tetris_config import COLS, ROWS
from tetris_feed import RenderFeed
from tetris_layout import Dims
from tetris_piece import Cell

# Colors per piece kind
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
FIXATED = (120,130,170)

@dataclass
class HudCache:
    score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w - d.margin, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in list(COLORS.items()) + [("#", FIXATED)]:
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    def draw_cells(self, screen: pygame.Surface, t: str, cells: Iterable[Cell]):
        sprite = self.cell_surf[t]
        for col, row in cells:
            x, y = self.dims.cell_origin(col, row)
            screen.blit(sprite, (x + 1, y + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Next:", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200,210,240))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("↓ Hold for fast drop", True, (165,175,215)),
                f.render("R Restart", True, (165,175,215)),
            ]
        screen.blit(self.hud.title, (d.panel_x + 8, d.panel_y + 4))
        screen.blit(self.hud.score_s, (d.panel_x + 8, d.panel_y + 5*d.cell))
        y = d.panel_y + 7*d.cell
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 8, y)); y += 20

    def draw_banner(self, screen: pygame.Surface, text: str):
        d = self.dims
        msg = self.big_font.render(text, True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    def draw(self, screen: pygame.Surface, feed: RenderFeed):
        screen.blit(self.bg, (0,0))
        self.draw_cells(screen, "#", feed.fixated)
        if feed.current_kind:
            self.draw_cells(screen, feed.current_kind, feed.current)
        if feed.next_kind:
            self.draw_cells(screen, feed.next_kind, feed.next_cells)
        self.draw_panel_hud(screen, feed.score)
        if feed.message:
            self.draw_banner(screen, feed.message)
