# pixel_scroller/screen/screens.py
import logging

import pygame as pg

from .screen_game import GameScreen
from .screen_pause import PauseScreen

logger = logging.getLogger(__name__)

# route name -> screen class; every class takes (manager, **kwargs)
ROUTES = {
    "game": GameScreen,
    "pause": PauseScreen,
}


class ScreenManager:
    """
    Stack of screens; the top one gets events and updates, all of them draw.
    The game sits at the bottom and the pause overlay is pushed over it,
    so pausing freezes the simulation without tearing it down.
    """
    def __init__(self, screen, clock, fonts, size, routes=None):
        self.screen = screen
        self.clock = clock
        self.fonts = fonts
        self.size = size
        self.routes = dict(ROUTES if routes is None else routes)
        self.stack = []

    def current(self):
        return self.stack[-1] if self.stack else None

    def below(self):
        """Screen under the top one (the game, while paused)."""
        return self.stack[-2] if len(self.stack) > 1 else None

    def _open(self, name, kwargs):
        if name not in self.routes:
            raise KeyError(f"no screen named '{name}'")
        logger.debug("open screen %s", name)
        return self.routes[name](self, **kwargs)

    def goto(self, name, **kwargs):
        self.stack = [self._open(name, kwargs)]

    def push(self, name, **kwargs):
        self.stack.append(self._open(name, kwargs))

    def pop(self):
        if len(self.stack) > 1:
            self.stack.pop()

    def handle_event(self, e):
        if self.stack:
            self.stack[-1].handle_event(e)

    def update(self, dt):
        if self.stack:
            self.stack[-1].update(dt)

    def draw(self):
        for view in self.stack:
            view.draw()
        pg.display.flip()
