# pixel_scroller/ui/board.py
import math

import pygame as pg
from pixel_scroller.config import CFG


def draw_background(surf, rect):
    """Sky with a row of flat clouds."""
    pg.draw.rect(surf, CFG.COL_SKY, rect)
    for i in range(10):
        r = pg.Rect(rect.x + i * 120, rect.y + 100 + int(math.sin(i) * 12), 80, 16)
        pg.draw.rect(surf, CFG.COL_CLOUD, r)


def draw_platforms(surf, platforms):
    for p in platforms:
        pg.draw.rect(surf, p.color, pg.Rect(int(p.x), int(p.y), int(p.w), int(p.h)))
