# viz/renderer_pygame.py
from __future__ import annotations
import os
from typing import Optional, Union
import numpy as np
import pygame as pg
from config import AppConfig
from core.frame import CellKind
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

COLORS = {
    CellKind.BODY: theme.BODY,
    CellKind.APPLE: theme.APPLE,
    CellKind.HEAD: theme.HEAD,
}

class PygameRenderer:
    """Draws frames into a window. Input still arrives line by line; the window only shows the board."""
    def __init__(self):
        self.cell = 32
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._frame_idx = 0

    def open(self, cfg: AppConfig) -> None:
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        side = cfg.grid_size * self.cell
        self.surf = pg.display.set_mode((side, side))
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface (no window, no flip)."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self._auto_flip = False

    def draw(self, frame: np.ndarray) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        if self._auto_flip:
            # keep the window responsive between input lines
            pg.event.pump()

        surf.fill(theme.BG)
        for y, row in enumerate(frame):
            for x, kind in enumerate(row):
                col = COLORS.get(int(kind))
                if col is not None:
                    pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))
                else:
                    pg.draw.rect(surf, theme.GRID, pg.Rect(x * c, y * c, c, c), width=1)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
