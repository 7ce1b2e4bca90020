# pixel_scroller/main.py
import logging
import sys
from pathlib import Path

import pygame as pg
from pixel_scroller.config import CFG, HERO, GOBLIN, ConfigError, load_entity_config
from pixel_scroller.screen.screens import ScreenManager
from pixel_scroller.sprites import AssetError, load_sheet

logger = logging.getLogger("pixel_scroller")

WIN_W, WIN_H = CFG.CANVAS_W, CFG.CANVAS_H
# optional per-type overrides: config/hero.json, config/goblin.json
_CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def pick_font(size):
    candidates = ["Segoe UI", "DejaVu Sans", "Arial", None]
    for name in candidates:
        try:
            f = pg.font.SysFont(name, size)
            _ = f.render("Aa", True, (255, 255, 255))
            return f
        except (pg.error, OSError):
            continue
    return pg.font.SysFont(None, size)


def _with_overrides(base):
    p = _CONFIG_DIR / f"{base.name}.json"
    if p.exists():
        return load_entity_config(p, base)
    return base


def boot():
    """Load configs and every sheet before the first tick; any failure aborts startup."""
    sheets, cfgs = {}, {}
    for base in (HERO, GOBLIN):
        cfg = _with_overrides(base)
        sheet, cfg = load_sheet(cfg)
        sheets[base.name] = sheet
        cfgs[base.name] = cfg
    return sheets, cfgs["hero"], cfgs["goblin"]


def main():
    logging.basicConfig(
        level=logging.DEBUG if CFG.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pg.init()
    pg.font.init()

    pg.event.set_allowed([pg.QUIT, pg.KEYDOWN, pg.KEYUP])

    screen = pg.display.set_mode((WIN_W, WIN_H), pg.SCALED)
    pg.display.set_caption("Pixel Scroller")
    clock = pg.time.Clock()

    try:
        sheets, hero_cfg, goblin_cfg = boot()
    except (AssetError, ConfigError) as e:
        logger.error("Startup failed: %s", e)
        pg.quit()
        sys.exit(1)

    fonts = {
        "title": pick_font(52),
        "mid":   pick_font(22),
        "sml":   pick_font(18),
    }

    manager = ScreenManager(screen, clock, fonts, (WIN_W, WIN_H))
    manager.goto("game", sheets=sheets, hero_cfg=hero_cfg, goblin_cfg=goblin_cfg)

    while True:
        dt = clock.tick(CFG.FPS)

        for e in pg.event.get():
            if e.type == pg.QUIT:
                pg.quit(); sys.exit()
            manager.handle_event(e)

        manager.update(dt)
        manager.draw()


if __name__ == "__main__":
    main()
