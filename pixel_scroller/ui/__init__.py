# pixel_scroller/ui/__init__.py
from .board import draw_background, draw_platforms
from .hud import draw_top_hud, draw_event_log, HUD_H

__all__ = ["draw_background", "draw_platforms", "draw_top_hud", "draw_event_log", "HUD_H"]
