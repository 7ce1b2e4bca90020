# pixel_scroller/ui/hud.py
import pygame as pg
from pixel_scroller.config import CFG

HUD_H = 40  # top strip height


def _text(font, txt, color):
    return font.render(txt, True, color)


def _draw_hearts_row(surf, left_x, mid_y, count, img=None, gap=6):
    # bitmap heart or rounded-rect placeholder
    w = img.get_width() if img else 18
    h = img.get_height() if img else 16
    x = left_x
    for _ in range(max(0, count)):
        if img:
            r = img.get_rect()
            r.midleft = (x, mid_y)
            surf.blit(img, r)
        else:
            r = pg.Rect(0, 0, w, h)
            r.midleft = (x, mid_y)
            pg.draw.rect(surf, CFG.COL_HEART, r, border_radius=6)
            pg.draw.rect(surf, (0, 0, 0), r, 1, border_radius=6)
        x += w + gap


def draw_top_hud(surf, W, hearts: int, message: str, fonts, heart_img=None):
    """Hearts on the left, the current prompt / result centred."""
    mid_y = HUD_H // 2
    _draw_hearts_row(surf, 12, mid_y, hearts, img=heart_img)

    if message:
        img = _text(fonts["mid"], message, CFG.COL_TEXT)
        shadow = _text(fonts["mid"], message, (0, 0, 0))
        r = img.get_rect(center=(W // 2, mid_y))
        surf.blit(shadow, r.move(2, 2))
        surf.blit(img, r)


def draw_event_log(surf, W, H, events, font, now_ms: int, max_lines: int = 6):
    """Bottom-right short log; ``events`` are dicts with text/color/until (ms)."""
    x = W - 18
    y = H - 14
    for itm in reversed(events[-max_lines:]):
        if now_ms < itm["until"]:
            img = font.render(itm["text"], True, itm["color"])
            r = img.get_rect(bottomright=(x, y))
            surf.blit(img, r)
            y -= r.height + 4
