# pixel_scroller/screen/screen_pause.py
import pygame as pg
from pixel_scroller.config import CFG

OPTIONS = ("Continue", "Restart")


class PauseScreen:
    """Menu over the frozen game. Up/Down picks, Enter confirms, Esc resumes."""

    def __init__(self, manager):
        self.m = manager
        self.W, self.H = manager.size
        self.selected = 0

    def _confirm(self):
        game = self.m.below()
        self.m.pop()
        if OPTIONS[self.selected] == "Restart" and game is not None:
            game.restart()

    def handle_event(self, e):
        if e.type != pg.KEYDOWN:
            return
        if e.key in (pg.K_ESCAPE, pg.K_p):
            self.m.pop()
        elif e.key in (pg.K_UP, pg.K_w):
            self.selected = (self.selected - 1) % len(OPTIONS)
        elif e.key in (pg.K_DOWN, pg.K_s):
            self.selected = (self.selected + 1) % len(OPTIONS)
        elif e.key in (pg.K_RETURN, pg.K_SPACE):
            self._confirm()

    def update(self, dt):
        pass

    def draw(self):
        s = self.m.screen
        shade = pg.Surface((self.W, self.H), pg.SRCALPHA)
        shade.fill((10, 16, 30, 160))
        s.blit(shade, (0, 0))

        cx, cy = self.W // 2, self.H // 2
        title = self.m.fonts["title"].render("Paused", True, CFG.COL_TEXT)
        s.blit(title, title.get_rect(center=(cx, cy - 70)))

        for i, text in enumerate(OPTIONS):
            picked = i == self.selected
            label = f"> {text} <" if picked else text
            col = CFG.COL_HEART if picked else CFG.COL_TEXT
            img = self.m.fonts["mid"].render(label, True, col)
            s.blit(img, img.get_rect(center=(cx, cy + i * 36)))
