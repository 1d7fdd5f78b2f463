# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from config import AppConfig
from core.board import Board
from core.interfaces import Snapshot
import viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(Board(cfg.grid_w, cfg.grid_h, self.cell).pixel_size)
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface; the caller handles flip and timing."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)

        if self.cfg.render_grid_lines:
            w, h = s.grid_w * c, s.grid_h * c
            for x in range(1, s.grid_w):
                pg.draw.line(surf, theme.GRID, (x * c, 0), (x * c, h))
            for y in range(1, s.grid_h):
                pg.draw.line(surf, theme.GRID, (0, y * c), (w, y * c))

        fx, fy = s.food
        pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud:
            if self._font is None:
                self._font = pg.font.SysFont(None, 22)
            hud = f"Score: {s.score}   Len: {len(s.snake)}"
            if s.terminated:
                hud += "   GAME OVER"
            surf.blit(self._font.render(hud, True, theme.TEXT), (6, 4))

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None
