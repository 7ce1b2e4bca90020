# pixel_scroller/screen/screen_game.py
from __future__ import annotations
import logging

import pygame as pg
from pixel_scroller.combat import attack_box, hurt_box, hit_window_active
from pixel_scroller.config import CFG
from pixel_scroller.input import InputState
from pixel_scroller.simulation import Simulation, Outcome
from pixel_scroller.ui.board import draw_background, draw_platforms
from pixel_scroller.ui.hud import draw_top_hud, draw_event_log

logger = logging.getLogger(__name__)

# ---- feature toggles from CFG ----
SHOW_BOXES = getattr(CFG, "SHOW_BOXES", False)
MSG_LOG_MS = getattr(CFG, "MSG_LOG_MS", 1400)


class GameScreen:
    """
    Side-scrolling duel: hero vs goblins.
      - update() samples the keyboard and runs one simulation tick
      - draw() renders whatever the tick left behind
    Sprite sheets are loaded before this screen exists (see main.boot).
    """

    def __init__(self, manager, sheets, hero_cfg, goblin_cfg):
        self.m = manager
        self.W, self.H = manager.size
        self.sheets = sheets  # {"hero": SpriteSheet, "goblin": SpriteSheet}
        self.sim = Simulation(hero_cfg=hero_cfg, goblin_cfg=goblin_cfg)
        self.debug_events = []  # bottom-right short logs
        self.show_boxes = SHOW_BOXES

    def restart(self):
        self.sim.restart()
        self.debug_events.clear()
        logger.info("Restart")

    # =====================  Input  =====================
    def handle_event(self, e):
        """Esc/P -> pause overlay; Enter/R restart once the encounter is over; B toggles boxes."""
        if e.type != pg.KEYDOWN:
            return
        if e.key in (pg.K_ESCAPE, pg.K_p):
            self.m.push("pause")
        elif e.key in (pg.K_RETURN, pg.K_r) and self.sim.outcome is not Outcome.PLAYING:
            self.restart()
        elif e.key == pg.K_b:
            self.show_boxes = not self.show_boxes

    # =====================  Update  =====================
    def update(self, dt_ms: int):
        inputs = InputState.from_pressed(pg.key.get_pressed())
        self.sim.tick(dt_ms / 1000.0, inputs)

        now = pg.time.get_ticks()
        for ev in self.sim.drain_events():
            self.debug_events.append({"text": ev["text"], "color": ev["color"],
                                      "until": now + MSG_LOG_MS})
        self.debug_events = [e for e in self.debug_events if now < e["until"]]

    # =====================  Draw  =====================
    def draw(self):
        s = self.m.screen
        draw_background(s, s.get_rect())
        draw_platforms(s, self.sim.world.platforms)

        for ent in self.sim.entities:
            sheet = self.sheets[ent.cfg.name]
            a = ent.animator
            sheet.draw(s, a.col, a.row, ent.x, ent.y, ent.cfg.scale, flip=ent.facing < 0)

        # Debug overlays
        if self.show_boxes:
            for ent in self.sim.entities:
                hb = hurt_box(ent)
                pg.draw.rect(s, (47, 213, 102), pg.Rect(int(hb.x), int(hb.y), int(hb.w), int(hb.h)), 2)
                if hit_window_active(ent):
                    ab = attack_box(ent)
                    pg.draw.rect(s, (230, 80, 80), pg.Rect(int(ab.x), int(ab.y), int(ab.w), int(ab.h)), 2)

        draw_top_hud(s, self.W, hearts=self.sim.hero.hp, message=self.sim.message, fonts=self.m.fonts)
        draw_event_log(s, self.W, self.H, self.debug_events, self.m.fonts["sml"], pg.time.get_ticks())

        if self.sim.outcome is not Outcome.PLAYING:
            tip = self.m.fonts["mid"].render("[Enter] Restart", True, CFG.COL_TEXT)
            s.blit(tip, tip.get_rect(center=(self.W // 2, self.H // 2)))
