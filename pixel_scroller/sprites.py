# pixel_scroller/sprites.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Tuple

import pygame as pg

from pixel_scroller.config import EntityConfig

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Paths & defaults
# -----------------------------------------------------------------------------
_ROOT_DIR = Path(__file__).resolve().parents[1]


class AssetError(RuntimeError):
    """A sprite sheet could not be loaded; the game cannot start without it."""


def _resolve(url: str) -> Path:
    p = Path(url)
    return p if p.is_absolute() else _ROOT_DIR / p


# -----------------------------------------------------------------------------
# Image loading
# -----------------------------------------------------------------------------
def _load(url: str) -> pg.Surface:
    path = _resolve(url)
    try:
        img = pg.image.load(str(path))
    except (pg.error, FileNotFoundError, OSError) as e:
        raise AssetError(f"cannot load sprite sheet {path}: {e}") from e
    # convert_alpha needs a display mode; keep the raw surface otherwise
    if pg.display.get_surface() is not None:
        img = img.convert_alpha()
    return img


# -----------------------------------------------------------------------------
# SpriteSheet: fixed-size cells with optional margin/spacing; draw helper
# -----------------------------------------------------------------------------
class SpriteSheet:
    def __init__(self, img: pg.Surface, cfg: EntityConfig):
        """
        Cells are frame_w x frame_h; cell (col, row) starts at
        margin + index * (size + spacing) on each axis.
        """
        self.img = img
        self.frame_w = int(cfg.frame_w)
        self.frame_h = int(cfg.frame_h)
        self.margin_x, self.margin_y = cfg.margin_x, cfg.margin_y
        self.spacing_x, self.spacing_y = cfg.spacing_x, cfg.spacing_y
        self._cache: Dict[Tuple[int, int, int, int, bool], pg.Surface] = {}

    @property
    def size(self) -> Tuple[int, int]:
        return self.img.get_size()

    def src_rect(self, col: int, row: int) -> pg.Rect:
        sx = self.margin_x + col * (self.frame_w + self.spacing_x)
        sy = self.margin_y + row * (self.frame_h + self.spacing_y)
        return pg.Rect(sx, sy, self.frame_w, self.frame_h)

    def frame(self, col: int, row: int, dw: int, dh: int, flip: bool = False) -> pg.Surface:
        """Scaled (nearest neighbour, no smoothing) and optionally mirrored cell."""
        key = (col, row, dw, dh, flip)
        surf = self._cache.get(key)
        if surf is None:
            src = self.src_rect(col, row).clip(self.img.get_rect())
            cell = self.img.subsurface(src) if src.width and src.height else pg.Surface((1, 1), pg.SRCALPHA)
            surf = pg.transform.scale(cell, (dw, dh))
            if flip:
                surf = pg.transform.flip(surf, True, False)
            self._cache[key] = surf
        return surf

    def draw(self, surface: pg.Surface, col: int, row: int, x: float, y: float,
             scale: float, flip: bool = False):
        dw = max(1, int(self.frame_w * scale))
        dh = max(1, int(self.frame_h * scale))
        surface.blit(self.frame(col, row, dw, dh, flip), (int(x), int(y)))


# -----------------------------------------------------------------------------
# Sheet factory
# -----------------------------------------------------------------------------
def load_sheet(cfg: EntityConfig) -> tuple[SpriteSheet, EntityConfig]:
    """
    Load cfg.url and return (sheet, cfg with frame size filled in).
    Without an explicit frame size the sheet is split into an 8x8 grid.
    """
    img = _load(cfg.url)
    w, h = img.get_size()
    if cfg.frame_w is None or cfg.frame_h is None:
        cfg = cfg.with_frame_size(w // 8, h // 8)
    logger.info("Loaded %s sheet %dx%d (cells %dx%d)", cfg.name, w, h, cfg.frame_w, cfg.frame_h)
    return SpriteSheet(img, cfg), cfg
